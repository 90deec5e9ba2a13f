"""Service model loading.

Operation models come from the botocore data loader. Extra model
directories can be registered for services botocore no longer bundles;
they are searched after botocore's own data.
"""

import threading
from functools import lru_cache
from typing import List, Optional

import botocore.session  # type: ignore
from botocore.model import ServiceModel  # type: ignore
import structlog

logger = structlog.get_logger()

_lock = threading.Lock()
_model_paths: List[str] = []
_session: Optional[botocore.session.Session] = None


def register_model_path(path: str) -> None:
    """Add a directory laid out as <service>/<api-version>/service-2.json."""
    global _session
    with _lock:
        if path in _model_paths:
            return
        _model_paths.append(path)
        _session = None
    load_service_model.cache_clear()
    logger.debug("aws_model_path_registered", path=path)


def get_session() -> botocore.session.Session:
    """Return the shared botocore session used for model loading."""
    global _session
    with _lock:
        if _session is None:
            session = botocore.session.get_session()
            loader = session.get_component("data_loader")
            for path in _model_paths:
                if path not in loader.search_paths:
                    loader.search_paths.append(path)
            _session = session
        return _session


@lru_cache(maxsize=None)
def load_service_model(service_name: str, api_version: Optional[str] = None) -> ServiceModel:
    """Load and cache the botocore service model for `service_name`."""
    return get_session().get_service_model(service_name, api_version=api_version)
