"""
Encryption selection for the ECR registry module.

A repository is encrypted either with the ECR-managed AES-256 key or with a
customer KMS key referenced by ARN.
"""

import logging
from dataclasses import dataclass
from typing import Union

from ecr_registry.registry_config import RegistryConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManagedKey:
	"""AES-256 encryption with a key owned by ECR."""

	encryption_type: str = 'AES256'


@dataclass(frozen=True)
class ExternalKey:
	"""KMS encryption with a customer key."""

	reference: str
	encryption_type: str = 'KMS'


EncryptionPolicy = Union[ManagedKey, ExternalKey]


def resolve_encryption(config: RegistryConfig) -> EncryptionPolicy:
	"""
	Pick the encryption for a repository.

	A KMS key is used only when enable_kms_encryption is set and kms_key is
	non-empty. When the flag is set without a key the repository falls back to
	the managed key; this is not an error, but a warning is logged.

	Args:
	    config: The registry configuration

	Returns:
	    EncryptionPolicy: ExternalKey or ManagedKey
	"""
	if config.use_managed_key_encryption and config.external_key_reference != '':
		return ExternalKey(reference=config.external_key_reference)

	if config.use_managed_key_encryption:
		logger.warning(
			f'enable_kms_encryption is set for repository {config.name} but kms_key is empty, '
			'falling back to AES256 managed encryption'
		)
	return ManagedKey()
