"""
Lookup of a deployed registry.

After CloudFormation has reconciled the stack, the repository URL and ARN are
available as stack outputs. This module reads them back with boto3.
"""

import logging
from dataclasses import dataclass
from typing import Dict

import boto3
from botocore.exceptions import ClientError

from ecr_registry.exceptions import ExternalEngineError
from ecr_registry.registry_stack import REPOSITORY_ARN_OUTPUT, REPOSITORY_URL_OUTPUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryHandle:
	"""URL and ARN of a deployed registry."""

	url: str
	arn: str

	def as_outputs(self) -> Dict[str, str]:
		return {'repository_url': self.url, 'repository_arn': self.arn}


def get_registry_handle(stack_name: str, cloudformation_client=None) -> RegistryHandle:
	"""
	Read the registry outputs of a deployed stack.

	Args:
	    stack_name: Name of the CloudFormation stack
	    cloudformation_client: Optional boto3 CloudFormation client

	Returns:
	    RegistryHandle: URL and ARN of the repository

	Raises:
	    ExternalEngineError: If CloudFormation reports an error or the outputs are missing
	"""
	cloudformation = cloudformation_client or boto3.client('cloudformation')

	try:
		response = cloudformation.describe_stacks(StackName=stack_name)
	except ClientError as e:
		logger.error(f'Error describing stack {stack_name}: {e}')
		raise ExternalEngineError(str(e)) from e

	stacks = response.get('Stacks', [])
	if not stacks:
		raise ExternalEngineError(f'Stack {stack_name} not found')

	outputs = {output['OutputKey']: output['OutputValue'] for output in stacks[0].get('Outputs', [])}
	missing = [key for key in (REPOSITORY_URL_OUTPUT, REPOSITORY_ARN_OUTPUT) if key not in outputs]
	if missing:
		raise ExternalEngineError(f'Stack {stack_name} is missing outputs: {", ".join(missing)}')

	return RegistryHandle(url=outputs[REPOSITORY_URL_OUTPUT], arn=outputs[REPOSITORY_ARN_OUTPUT])
