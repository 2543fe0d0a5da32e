"""
ECR-related resource creation for the ECR registry module.

This module provides the function that declares the ECR repository from a
registry descriptor.
"""

from constructs import Construct
from aws_cdk import RemovalPolicy, aws_kms as kms, aws_ecr as ecr

from ecr_registry.descriptor import RegistryDescriptor
from ecr_registry.encryption import ExternalKey

TAG_MUTABILITY = {
	'MUTABLE': ecr.TagMutability.MUTABLE,
	'IMMUTABLE': ecr.TagMutability.IMMUTABLE,
}


def create_ecr_repository(scope: Construct, ecr_id: str, descriptor: RegistryDescriptor) -> ecr.Repository:
	"""
	Create an ECR repository for container images.

	Uses the managed AES-256 key unless the descriptor selects an external
	KMS key, which is imported by ARN.

	Args:
	    scope: The CDK construct scope
	    ecr_id: Identifier for the ECR repository
	    descriptor: Desired state of the registry

	Returns:
	    ecr.Repository: The created ECR repository
	"""
	if isinstance(descriptor.encryption, ExternalKey):
		encryption = ecr.RepositoryEncryption.KMS
		encryption_key = kms.Key.from_key_arn(scope, f'kms-{ecr_id}', descriptor.encryption.reference)
	else:
		encryption = ecr.RepositoryEncryption.AES_256
		encryption_key = None

	lifecycle_rules = None
	if descriptor.max_image_count is not None:
		lifecycle_rules = [ecr.LifecycleRule(max_image_count=descriptor.max_image_count)]

	return ecr.Repository(
		scope=scope,
		id=f'ecr-{ecr_id}-repository',
		repository_name=descriptor.name,
		image_scan_on_push=descriptor.scan_on_push,
		image_tag_mutability=TAG_MUTABILITY[descriptor.image_tag_mutability],
		lifecycle_rules=lifecycle_rules,
		removal_policy=RemovalPolicy.DESTROY if descriptor.force_delete else RemovalPolicy.RETAIN,
		empty_on_delete=descriptor.force_delete,
		encryption=encryption,
		encryption_key=encryption_key,
	)
