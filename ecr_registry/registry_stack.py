"""
Registry Stack for the ECR registry module

This module defines the CDK stack that declares a single ECR repository with
its scanning and encryption configuration, its access policy and its tags,
and exports the repository URL and ARN as stack outputs.
"""

from typing import Any

from aws_cdk import (
	CfnOutput,
	Stack,
	Tags,
)
from cdk_nag import NagSuppressions
from constructs import Construct

from ecr_registry.descriptor import RegistryDescriptor, build_registry_descriptor
from ecr_registry.registry_config import RegistryConfig
from ecr_registry.resources.ecr import create_ecr_repository
from ecr_registry.resources.repository_policy import add_push_pull_policy

# CloudFormation output keys, exposed as repository_url and repository_arn
REPOSITORY_URL_OUTPUT = 'RepositoryUrl'
REPOSITORY_ARN_OUTPUT = 'RepositoryArn'


class RegistryStackProps:
	"""
	Properties for the RegistryStack.

	Building the props validates the configuration, so an invalid
	configuration fails before the stack is constructed.

	Attributes:
	    config (RegistryConfig): The registry configuration
	    descriptor (RegistryDescriptor): Desired state derived from the configuration
	"""

	def __init__(
		self,
		*,
		config: RegistryConfig,
	):
		"""
		Initialize RegistryStackProps.

		Args:
		    config (RegistryConfig): The registry configuration
		"""
		self.config = config
		self.descriptor: RegistryDescriptor = build_registry_descriptor(config)


class RegistryStack(Stack):
	"""
	Declares one ECR repository.

	The stack creates:
	- The ECR repository with scan-on-push and encryption settings
	- The repository resource policy granting push/pull
	- The five required tags on every resource
	- Outputs repository_url and repository_arn
	"""

	def __init__(
		self,
		scope: Construct,
		construct_id: str,
		*,
		props: RegistryStackProps,
		**kwargs: Any,
	) -> None:
		"""
		Initialize RegistryStack.

		Args:
		    scope (Construct): CDK construct scope
		    construct_id (str): CDK construct ID
		    props (RegistryStackProps): Properties for the stack
		    **kwargs (Any): Additional keyword arguments passed to the Stack constructor
		"""
		super().__init__(scope, construct_id, **kwargs)

		descriptor = props.descriptor

		# Apply tags to all resources in the stack
		for key, value in descriptor.tags.items():
			Tags.of(self).add(key=key, value=value)

		self.repository = create_ecr_repository(scope=self, ecr_id='registry', descriptor=descriptor)
		add_push_pull_policy(self.repository, descriptor.access_policy)
		NagSuppressions.add_resource_suppressions(
			self.repository,
			[
				{
					'id': 'AwsSolutions-ECR1',
					'reason': 'Push/pull for any principal is the documented permissive default of this module (ALLOW_ANY_PRINCIPAL). Restrict the policy in accounts that need it.',
				}
			],
		)

		CfnOutput(
			self,
			REPOSITORY_URL_OUTPUT,
			value=self.repository.repository_uri,
			description='URL of the ECR repository',
		)
		CfnOutput(
			self,
			REPOSITORY_ARN_OUTPUT,
			value=self.repository.repository_arn,
			description='ARN of the ECR repository',
		)
