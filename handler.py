"""
Lambda handler functions for the AWS ECS node.

The host platform calls describe_node to render the node form, load_options
(or get_clusters / get_services directly) to fill its dropdowns, and execute
to run the selected operation.
"""
import copy
from typing import Any, Dict, List
from logger_config import get_logger
from node_description import (
    DESCRIPTION,
    DESCRIBE_SERVICES,
    FORCE_NEW_DEPLOYMENT,
    operation_values,
)
from services.ecs_service import EcsService, parse_service_names
from utils.decorators import node_handler
from utils.exceptions import NodeParameterError
from utils.parameters import NodeParameters

logger = get_logger(__name__)

MAX_DESCRIBE_SERVICES = 10


def _options(arns: List[str]) -> List[Dict[str, str]]:
    return [{'name': arn, 'value': arn} for arn in arns]


def _output(response: Dict[str, Any]) -> List[List[Dict[str, Any]]]:
    """Wrap an AWS response as the node's single output item."""
    if not response:
        return [[]]
    return [[{'json': response, 'pairedItem': {'item': 0}}]]


def list_cluster_options(_event) -> List[Dict[str, str]]:
    """Options for the cluster dropdown.

    Takes the event only to share the LOAD_OPTIONS_METHODS signature.
    """
    return _options(EcsService().list_clusters())


def list_service_options(event) -> List[Dict[str, str]]:
    """Options for the service dropdown of the selected cluster."""
    cluster = NodeParameters.from_event(event).get_string('clusterName')
    if not cluster:
        return []
    return _options(EcsService().list_services(cluster))


LOAD_OPTIONS_METHODS = {
    'getClusters': list_cluster_options,
    'getServices': list_service_options,
}


def run_operation(event) -> List[List[Dict[str, Any]]]:
    """Dispatch the selected operation and return the node output."""
    params = NodeParameters.from_event(event)
    operation = params.get('operation')
    if operation not in operation_values():
        raise NodeParameterError(
            f'Unsupported operation "{operation}"', field='operation', value=operation
        )
    cluster = params.get_string('clusterName')
    ecs = EcsService()

    if operation == DESCRIBE_SERVICES:
        services = parse_service_names(params.get_string('serviceNames'))
        if not services:
            raise NodeParameterError(
                'Parameter "serviceNames" must name at least one service',
                field='serviceNames'
            )
        if len(services) > MAX_DESCRIBE_SERVICES:
            raise NodeParameterError(
                f'At most {MAX_DESCRIBE_SERVICES} services can be described at once, '
                f'got {len(services)}',
                field='serviceNames',
                value=services
            )
        response = ecs.describe_services(cluster, services)

    elif operation == FORCE_NEW_DEPLOYMENT:
        service = params.require_string('serviceName')
        desired_count = params.get('desiredCount')
        response = ecs.force_new_deployment(cluster, service, desired_count)

    return _output(response)


@node_handler
def describe_node(event, context):
    """Return the node's declarative description."""
    return copy.deepcopy(DESCRIPTION)


@node_handler
def get_clusters(event, context):
    """List clusters for the cluster dropdown."""
    return list_cluster_options(event)


@node_handler
def get_services(event, context):
    """List services of the chosen cluster for the service dropdown."""
    return list_service_options(event)


@node_handler
def load_options(event, context):
    """
    Run the load options method named in event["method"].

    The method names are the loadOptionsMethod values used in the
    node description.
    """
    method = event.get('method') if isinstance(event, dict) else None
    if method not in LOAD_OPTIONS_METHODS:
        raise NodeParameterError(
            f'Unknown load options method "{method}"', field='method', value=method
        )
    logger.debug(f'Loading options with {method}')
    return LOAD_OPTIONS_METHODS[method](event)


@node_handler
def execute(event, context):
    """Run the selected ECS operation."""
    return run_operation(event)
