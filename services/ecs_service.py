"""
ECS service for the control-plane calls the node exposes.
"""
from typing import Any, Dict, List, Optional
from logger_config import get_logger
from .aws_api_service import AwsApiService

logger = get_logger(__name__)

ECS_TARGET_PREFIX = 'AmazonEC2ContainerServiceV20141113'
CONTENT_TYPE = 'application/x-amz-json-1.1'

LIST_SERVICES_PAGE_SIZE = 50
LIST_CLUSTERS_PAGE_SIZE = 100


class EcsService:
    """Service for ECS operations over the JSON API."""

    def __init__(self, api_service: Optional[AwsApiService] = None) -> None:
        """
        Initialize ECS service.

        Args:
            api_service: Request helper to send calls through
        """
        self.api_service = api_service or AwsApiService()

    @staticmethod
    def headers(action: str) -> Dict[str, str]:
        return {
            'Content-Type': CONTENT_TYPE,
            'X-Amz-Target': f'{ECS_TARGET_PREFIX}.{action}',
        }

    def call(self, action: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST one ECS action and return AWS's response unchanged."""
        return self.api_service.request('ecs', 'POST', '/', body, self.headers(action))

    def _paginate(self, action: str, body: Dict[str, Any], result_key: str) -> List[str]:
        """
        Call a list action until AWS stops returning a nextToken.

        A first page without result_key means nothing to list; later pages
        lacking it contribute nothing. An empty first page that still carries
        a nextToken keeps paginating.
        """
        response = self.call(action, body)
        if response.get(result_key) is None:
            return []

        items = list(response[result_key])
        next_token = response.get('nextToken')
        pages = 1
        while next_token:
            response = self.call(action, {**body, 'nextToken': next_token})
            items.extend(response.get(result_key) or [])
            next_token = response.get('nextToken')
            pages += 1

        logger.info(f'{action} returned {len(items)} items over {pages} page(s)')
        return items

    def list_clusters(self) -> List[str]:
        """Return the ARNs of every cluster in the configured region."""
        return self._paginate(
            'ListClusters', {'maxResults': LIST_CLUSTERS_PAGE_SIZE}, 'clusterArns'
        )

    def list_services(self, cluster: str) -> List[str]:
        """
        Return the ARNs of every service in a cluster.

        Args:
            cluster: Cluster name or ARN; empty means no services
        """
        if not cluster:
            return []
        return self._paginate(
            'ListServices',
            {'cluster': cluster, 'maxResults': LIST_SERVICES_PAGE_SIZE},
            'serviceArns',
        )

    def describe_services(self, cluster: str, services: List[str]) -> Dict[str, Any]:
        """
        Describe services in a cluster.

        Args:
            cluster: Cluster name or ARN
            services: Service names or ARNs
        """
        logger.info(f'Describing {len(services)} service(s) in cluster {cluster}')
        return self.call('DescribeServices', {'cluster': cluster, 'services': services})

    def force_new_deployment(
        self,
        cluster: str,
        service: str,
        desired_count: int = -1
    ) -> Dict[str, Any]:
        """
        Start a new deployment of a service with its current task definition.

        Args:
            cluster: Cluster name or ARN
            service: Service name or ARN
            desired_count: New desired task count; values below 1 leave it unchanged
        """
        body: Dict[str, Any] = {
            'cluster': cluster,
            'service': service,
            'forceNewDeployment': True,
        }
        if desired_count > 0:
            body['desiredCount'] = desired_count

        logger.info(
            f'Forcing new deployment of {service} in cluster {cluster}'
            + (f' with desiredCount={desired_count}' if 'desiredCount' in body else '')
        )
        return self.call('UpdateService', body)


def parse_service_names(raw: str) -> List[str]:
    """Split a comma-separated list of service names, dropping blanks."""
    return [name.strip() for name in raw.split(',') if name.strip()]
