"""
Declarative metadata for the AWS ECS node.

The host platform renders the node's form from DESCRIPTION: which inputs
exist, their types and defaults, and which dropdowns are populated through
the load options handlers in handler.py.
"""
from typing import Any, Dict, List

DESCRIBE_SERVICES = 'describeServices'
FORCE_NEW_DEPLOYMENT = 'forceNewDeployment'

EXPRESSION_DOCS_URL = 'https://docs.n8n.io/code/expressions/'

DESCRIPTION: Dict[str, Any] = {
    'displayName': 'AWS ECS',
    'name': 'awsEcs',
    'icon': 'file:ecs.svg',
    'group': ['output'],
    'version': 1,
    'subtitle': '={{$parameter["operation"]}}',
    'description': 'Manage AWS ECS resources',
    'defaults': {
        'name': 'AWS ECS',
    },
    'inputs': ['main'],
    'outputs': ['main'],
    'credentials': [
        {
            'name': 'aws',
            'required': True,
        },
    ],
    'properties': [
        {
            'displayName': 'Operation',
            'name': 'operation',
            'type': 'options',
            'noDataExpression': True,
            'options': [
                {
                    'name': 'Describe Services',
                    'value': DESCRIBE_SERVICES,
                    'description': 'Get details about one or more ECS services',
                    'action': 'Describe services',
                },
                {
                    'name': 'Force New Deployment',
                    'value': FORCE_NEW_DEPLOYMENT,
                    'description': 'Force a new deployment of a service',
                    'action': 'Force a new deployment',
                },
            ],
            'default': FORCE_NEW_DEPLOYMENT,
        },
        {
            'displayName': 'Cluster Name or ID',
            'name': 'clusterName',
            'type': 'options',
            'typeOptions': {
                'loadOptionsMethod': 'getClusters',
            },
            'displayOptions': {
                'show': {
                    'operation': [FORCE_NEW_DEPLOYMENT, DESCRIBE_SERVICES],
                },
            },
            'default': '',
            'description': (
                'The name of the cluster that hosts the service to update.  '
                'Choose from the list, or specify an ID using an '
                f'<a href="{EXPRESSION_DOCS_URL}">expression</a>.'
            ),
        },
        {
            'displayName': 'Service Name or ID',
            'name': 'serviceName',
            'type': 'options',
            'typeOptions': {
                'loadOptionsMethod': 'getServices',
                'loadOptionsDependsOn': ['clusterName'],
            },
            'displayOptions': {
                'show': {
                    'operation': [FORCE_NEW_DEPLOYMENT],
                },
                'hide': {
                    'clusterName': [''],
                },
            },
            'required': True,
            'default': '',
            'description': (
                'The name of the service to update.  '
                'Choose from the list, or specify an ID using an '
                f'<a href="{EXPRESSION_DOCS_URL}">expression</a>.'
            ),
        },
        {
            'displayName': 'Service Names or ARNs',
            'name': 'serviceNames',
            'type': 'string',
            'displayOptions': {
                'show': {
                    'operation': [DESCRIBE_SERVICES],
                },
                'hide': {
                    'clusterName': [''],
                },
            },
            'required': True,
            'default': '',
            'description': (
                'Comma-separated list of service names or ARNs to describe (max 10). '
                'E.g. "my-service-1, my-service-2".'
            ),
        },
        {
            'displayName': 'Desired Count',
            'name': 'desiredCount',
            'type': 'number',
            'displayOptions': {
                'show': {
                    'operation': [FORCE_NEW_DEPLOYMENT],
                },
            },
            'default': -1,
            'description': (
                'The number of desired task instances for the service. '
                'Set to -1 (or leave as default) to keep the current desired count unchanged.'
            ),
        },
    ],
}


def get_property(name: str) -> Dict[str, Any]:
    """
    Look up a property definition by its parameter name.

    Raises:
        KeyError: If the node has no property with that name
    """
    for prop in DESCRIPTION['properties']:
        if prop['name'] == name:
            return prop
    raise KeyError(name)


def operation_values() -> List[str]:
    return [option['value'] for option in get_property('operation')['options']]
