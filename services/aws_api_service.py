"""
Shared request helper for AWS JSON APIs.

Requests are signed with Signature Version 4 using credentials resolved by
boto3's default credential chain and sent with requests.
"""
import json
import boto3
import requests
from typing import Any, Dict, Optional
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError
from config import Config, get_config
from logger_config import get_logger
from utils.exceptions import AwsApiError, AwsCredentialsError

logger = get_logger(__name__)


class AwsApiService:
    """Service for signed calls to AWS JSON RPC-style endpoints."""

    def __init__(self, config: Optional[Config] = None) -> None:
        """
        Initialize AWS API service.

        Args:
            config: Configuration to use (defaults to get_config())
        """
        self.config: Config = config or get_config()
        self._session: Optional[boto3.Session] = None

    @property
    def session(self) -> boto3.Session:
        """Lazy initialization of the boto3 session."""
        if self._session is None:
            self._session = boto3.Session(
                profile_name=self.config.aws_profile,
                region_name=self.config.aws_region,
            )
        return self._session

    def endpoint(self, service: str) -> str:
        """Base URL for a service, honouring the configured ECS endpoint."""
        if service == 'ecs' and self.config.ecs_endpoint:
            return self.config.ecs_endpoint
        return f'https://{service}.{self.config.aws_region}.amazonaws.com'

    def sign(
        self,
        service: str,
        method: str,
        url: str,
        payload: str,
        headers: Dict[str, str]
    ) -> Dict[str, str]:
        """
        Sign a request and return the headers to send with it.

        Raises:
            AwsCredentialsError: If no credentials can be resolved
        """
        try:
            credentials = self.session.get_credentials()
        except BotoCoreError as e:
            raise AwsCredentialsError(f'Failed to resolve AWS credentials: {str(e)}') from e
        if credentials is None:
            raise AwsCredentialsError('No AWS credentials found')

        aws_request = AWSRequest(method=method, url=url, data=payload, headers=headers)
        SigV4Auth(
            credentials.get_frozen_credentials(), service, self.config.aws_region
        ).add_auth(aws_request)
        return dict(aws_request.headers.items())

    def request(
        self,
        service: str,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Send one signed request and return the decoded response.

        Args:
            service: AWS service endpoint prefix, e.g. 'ecs'
            method: HTTP method
            path: Request path, e.g. '/'
            body: JSON body (an empty object when None)
            headers: Extra headers such as X-Amz-Target

        Returns:
            Decoded JSON response; {} for an empty body

        Raises:
            AwsApiError: If the request fails or AWS returns an error status
            AwsCredentialsError: If no credentials can be resolved
        """
        url = f'{self.endpoint(service)}{path}'
        payload = json.dumps(body if body is not None else {})
        signed_headers = self.sign(service, method, url, payload, dict(headers or {}))

        target = signed_headers.get('X-Amz-Target', '')
        logger.debug(f'{method} {url} {target}')

        try:
            response = requests.request(
                method,
                url,
                data=payload.encode('utf-8'),
                headers=signed_headers,
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            logger.error(f'AWS request {target or url} failed: {str(e)}')
            raise AwsApiError(f'AWS request failed: {str(e)}') from e

        data = self._decode(response)

        if response.status_code >= 400:
            error_type, message = self._error_details(response, data)
            logger.error(
                f'AWS request {target or url} returned {response.status_code}: '
                f'{error_type} {message}'
            )
            raise AwsApiError(
                f'{error_type or "AWS error"}: {message or response.reason}',
                status_code=response.status_code,
                error_type=error_type,
                response_data=data,
            )

        return data

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        if not response.text:
            return {}
        try:
            return response.json()
        except ValueError:
            return {'body': response.text}

    @staticmethod
    def _error_details(response: requests.Response, data: Dict[str, Any]):
        """Extract (error_type, message) from an AWS JSON error response."""
        if not isinstance(data, dict):
            data = {}
        error_type = data.get('__type') or response.headers.get('x-amzn-ErrorType') or ''
        # '__type' may be namespaced: 'com.amazonaws.ecs#ClusterNotFoundException'
        error_type = error_type.split('#')[-1].split(':')[0] or None
        message = data.get('message') or data.get('Message') or ''
        return error_type, message
