"""
Registry provisioning descriptor.

The descriptor is the complete desired state of one registry: the repository
declaration, its access policy and its tags. It is built once from a
RegistryConfig and handed to the CDK stack, which turns it into constructs.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ecr_registry.encryption import EncryptionPolicy, ExternalKey, resolve_encryption
from ecr_registry.registry_config import RegistryConfig
from ecr_registry.resources.repository_policy import AccessPolicy, build_access_policy
from ecr_registry.tagging import build_tag_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryDescriptor:
	"""
	Desired state of a registry.

	Attributes:
	    name (str): Repository name
	    scan_on_push (bool): Scan images on push
	    encryption (EncryptionPolicy): Resolved encryption
	    access_policy (AccessPolicy): Policy declaration bound to the repository
	    tags (Mapping[str, str]): The five required tags
	    image_tag_mutability (str): 'MUTABLE' or 'IMMUTABLE'
	    max_image_count (Optional[int]): Lifecycle limit, None for unlimited
	    force_delete (bool): Remove the repository and its images with the stack
	"""

	name: str
	scan_on_push: bool
	encryption: EncryptionPolicy
	access_policy: AccessPolicy
	tags: Mapping[str, str]
	image_tag_mutability: str = 'MUTABLE'
	max_image_count: Optional[int] = None
	force_delete: bool = False

	def __post_init__(self):
		object.__setattr__(self, 'tags', MappingProxyType(dict(self.tags)))

	def to_document(self) -> Dict[str, Any]:
		"""Render the descriptor as a JSON-serializable document."""
		encryption = {'type': self.encryption.encryption_type}
		if isinstance(self.encryption, ExternalKey):
			encryption['kms_key'] = self.encryption.reference

		return {
			'registry': {
				'name': self.name,
				'scan_on_push': self.scan_on_push,
				'encryption': encryption,
				'image_tag_mutability': self.image_tag_mutability,
				'max_image_count': self.max_image_count,
				'force_delete': self.force_delete,
			},
			'access_policy': self.access_policy.to_document(),
			'tags': dict(self.tags),
		}


def build_registry_descriptor(config: Union[RegistryConfig, Dict[str, Any]]) -> RegistryDescriptor:
	"""
	Build the descriptor for a registry configuration.

	Accepts either a RegistryConfig or the raw 'registry' settings block; the
	latter is validated through RegistryConfig.from_settings first.

	Args:
	    config: RegistryConfig or settings dictionary

	Returns:
	    RegistryDescriptor: The desired state of the registry

	Raises:
	    ConfigurationError: If the configuration is invalid
	"""
	if not isinstance(config, RegistryConfig):
		config = RegistryConfig.from_settings(config)

	descriptor = RegistryDescriptor(
		name=config.name,
		scan_on_push=config.scan_on_push,
		encryption=resolve_encryption(config),
		access_policy=build_access_policy(config.name),
		tags=build_tag_set(config.tags),
		image_tag_mutability=config.image_tag_mutability,
		max_image_count=config.max_image_count,
		force_delete=config.force_delete,
	)
	logger.debug(f'Built descriptor for repository {descriptor.name}: {descriptor.encryption}')
	return descriptor
