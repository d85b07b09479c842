"""
Integration tests against a moto-mocked ECS backend.

The signed requests go out through the requests library and are answered
by moto's ECS implementation.
"""
import os
import boto3
import pytest
from unittest.mock import patch
from moto import mock_aws
from config import Config
from services.aws_api_service import AwsApiService
from services.ecs_service import EcsService

REGION = 'us-east-1'


@pytest.fixture
def aws_env():
    """Region and fake credentials, without a profile that could override them."""
    env = {
        'AWS_REGION': REGION,
        'AWS_DEFAULT_REGION': REGION,
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
    }
    with patch.dict(os.environ, env):
        os.environ.pop('AWS_PROFILE', None)
        os.environ.pop('ECS_ENDPOINT', None)
        yield


def create_cluster_with_services(cluster_name, service_names):
    """Create a cluster, a task definition and one service per name."""
    client = boto3.client('ecs', region_name=REGION)
    client.create_cluster(clusterName=cluster_name)
    client.register_task_definition(
        family='web',
        containerDefinitions=[{
            'name': 'web',
            'image': 'nginx:latest',
            'memory': 128,
        }]
    )
    for name in service_names:
        client.create_service(
            cluster=cluster_name,
            serviceName=name,
            taskDefinition='web',
            desiredCount=1,
        )
    return client


@pytest.mark.integration
@mock_aws()
def test_list_clusters_and_services(aws_env):
    """Test the dropdown listings against mocked ECS."""
    create_cluster_with_services('prod', ['api', 'worker'])

    ecs = EcsService(AwsApiService(Config(aws_region=REGION)))

    clusters = ecs.list_clusters()
    assert len(clusters) == 1
    assert clusters[0].endswith('cluster/prod')

    services = ecs.list_services('prod')
    assert sorted(arn.rsplit('/', 1)[-1] for arn in services) == ['api', 'worker']


@pytest.mark.integration
@mock_aws()
def test_describe_services_and_force_new_deployment(aws_env):
    """Test describing a service and forcing a new deployment with a new count."""
    client = create_cluster_with_services('prod', ['api'])

    ecs = EcsService(AwsApiService(Config(aws_region=REGION)))

    described = ecs.describe_services('prod', ['api'])
    assert [s['serviceName'] for s in described['services']] == ['api']

    updated = ecs.force_new_deployment('prod', 'api', 3)
    assert updated['service']['serviceName'] == 'api'

    after = client.describe_services(cluster='prod', services=['api'])
    assert after['services'][0]['desiredCount'] == 3


@pytest.mark.integration
@mock_aws()
def test_execute_handler_end_to_end(aws_env):
    """Test the execute handler returns the AWS response as the node output."""
    create_cluster_with_services('prod', ['api'])

    import config
    config._config = None
    from handler import execute

    result = execute({'parameters': {
        'operation': 'describeServices',
        'clusterName': 'prod',
        'serviceNames': 'api',
    }}, None)

    config._config = None

    items = result['result'][0]
    assert len(items) == 1
    assert items[0]['pairedItem'] == {'item': 0}
    assert items[0]['json']['services'][0]['serviceName'] == 'api'
