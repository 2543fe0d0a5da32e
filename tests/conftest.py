"""
Shared pytest fixtures for the ECR registry tests.
"""

import os

import aws_cdk as cdk
import pytest

from ecr_registry.registry_config import RegistryConfig
from ecr_registry.registry_stack import RegistryStack, RegistryStackProps

KMS_KEY_ARN = 'arn:aws:kms:us-east-1:123456789012:key/1234abcd-12ab-34cd-56ef-1234567890ab'


@pytest.fixture(scope='function', autouse=True)
def aws_credentials():
	"""Mocked AWS Credentials."""
	os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
	os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
	os.environ['AWS_SECURITY_TOKEN'] = 'testing'
	os.environ['AWS_SESSION_TOKEN'] = 'testing'
	os.environ['AWS_DEFAULT_REGION'] = 'us-east-1'

	yield

	os.environ.pop('AWS_ACCESS_KEY_ID', None)
	os.environ.pop('AWS_SECRET_ACCESS_KEY', None)
	os.environ.pop('AWS_SECURITY_TOKEN', None)
	os.environ.pop('AWS_SESSION_TOKEN', None)
	os.environ.pop('AWS_DEFAULT_REGION', None)


@pytest.fixture
def default_settings():
	"""Registry settings with only the required field."""
	return {'repository_name': 'my-repo'}


@pytest.fixture
def kms_settings():
	"""Registry settings selecting an external KMS key."""
	return {
		'repository_name': 'my-repo',
		'enable_kms_encryption': True,
		'kms_key': KMS_KEY_ARN,
	}


@pytest.fixture
def make_stack():
	"""Return a factory that synthesizes a RegistryStack from a RegistryConfig."""

	def _make_stack(config: RegistryConfig) -> RegistryStack:
		app = cdk.App()
		return RegistryStack(app, 'test-RegistryStack', props=RegistryStackProps(config=config))

	return _make_stack
