"""Service clients built on the awsruntime descriptor runtime.

Models for services botocore no longer ships live under ``data/``.
"""

import os

from awsruntime.clients.models import register_model_path

register_model_path(os.path.join(os.path.dirname(__file__), "data"))

# pylint: disable=wrong-import-position
from awsservices.appconfig import AppConfigClient  # noqa: E402
from awsservices.appstream import AppStreamClient  # noqa: E402
from awsservices.codestar import CodeStarClient  # noqa: E402
from awsservices.elasticbeanstalk import ElasticBeanstalkClient  # noqa: E402
from awsservices.facade import AWSClients  # noqa: E402
from awsservices.glacier import GlacierClient  # noqa: E402
from awsservices.opensearch import OpenSearchServiceClient  # noqa: E402
from awsservices.route53resolver import Route53ResolverClient  # noqa: E402

__all__ = [
    "AWSClients",
    "AppConfigClient",
    "AppStreamClient",
    "CodeStarClient",
    "ElasticBeanstalkClient",
    "GlacierClient",
    "OpenSearchServiceClient",
    "Route53ResolverClient",
]
