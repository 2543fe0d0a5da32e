"""
Registry configuration for the ECR registry module.

This module defines the immutable RegistryConfig and maps the settings file
keys (repository_name, enable_image_scanning, enable_kms_encryption, kms_key
and the tag fields) onto it. All local validation happens here so that a bad
configuration fails before any CDK construct is created.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ecr_registry.exceptions import ConfigurationError
from ecr_registry.tagging import REQUIRED_TAG_KEYS, TAG_SETTING_KEYS

# ECR repository name grammar, including namespaces separated by '/'
REPOSITORY_NAME_PATTERN = re.compile(r'(?:[a-z0-9]+(?:[._-][a-z0-9]+)*/)*[a-z0-9]+(?:[._-][a-z0-9]+)*')
REPOSITORY_NAME_MIN_LENGTH = 2
REPOSITORY_NAME_MAX_LENGTH = 256

TAG_MUTABILITY_VALUES = ('MUTABLE', 'IMMUTABLE')


def _require_bool(field_name: str, value: Any) -> None:
	if not isinstance(value, bool):
		raise ConfigurationError(field_name, f'must be a boolean, got {type(value).__name__}')


def validate_repository_name(name: Any) -> None:
	"""
	Validate a repository name.

	Empty and whitespace-only names are always rejected. The ECR naming
	grammar is checked as well so that obvious mistakes fail before deployment;
	CloudFormation remains the authority on the full rules.

	Args:
	    name: Candidate repository name

	Raises:
	    ConfigurationError: If the name is missing or malformed
	"""
	if name is None:
		raise ConfigurationError('repository_name', 'is required')
	if not isinstance(name, str):
		raise ConfigurationError('repository_name', f'must be a string, got {type(name).__name__}')
	if not name.strip():
		raise ConfigurationError('repository_name', 'must not be empty')
	if not REPOSITORY_NAME_MIN_LENGTH <= len(name) <= REPOSITORY_NAME_MAX_LENGTH:
		raise ConfigurationError(
			'repository_name',
			f'must be between {REPOSITORY_NAME_MIN_LENGTH} and {REPOSITORY_NAME_MAX_LENGTH} characters',
		)
	if not REPOSITORY_NAME_PATTERN.fullmatch(name):
		raise ConfigurationError(
			'repository_name',
			f"'{name}' may only contain lowercase letters, digits, hyphens, underscores, periods and slashes",
		)


@dataclass(frozen=True)
class RegistryConfig:
	"""
	Desired configuration of a single ECR repository.

	Attributes:
	    name (str): Repository name, unique within the account and region
	    scan_on_push (bool): Scan images when they are pushed
	    use_managed_key_encryption (bool): Request encryption with a KMS key
	    external_key_reference (str): ARN of the KMS key to encrypt with
	    tags (Mapping[str, str]): Tag overrides keyed by tag key (e.g. 'Company')
	    image_tag_mutability (str): 'MUTABLE' or 'IMMUTABLE'
	    max_image_count (Optional[int]): Keep at most this many images, unlimited when None
	    force_delete (bool): Delete the repository and its images with the stack
	"""

	name: str
	scan_on_push: bool = True
	use_managed_key_encryption: bool = False
	external_key_reference: str = ''
	tags: Mapping[str, str] = field(default_factory=dict)
	image_tag_mutability: str = 'MUTABLE'
	max_image_count: Optional[int] = None
	force_delete: bool = False

	def __post_init__(self):
		validate_repository_name(self.name)
		_require_bool('enable_image_scanning', self.scan_on_push)
		_require_bool('enable_kms_encryption', self.use_managed_key_encryption)
		_require_bool('force_delete', self.force_delete)

		if self.external_key_reference is None:
			object.__setattr__(self, 'external_key_reference', '')
		if not isinstance(self.external_key_reference, str):
			raise ConfigurationError('kms_key', 'must be a string')
		if self.use_managed_key_encryption and self.external_key_reference and not self.external_key_reference.strip():
			raise ConfigurationError('kms_key', 'must not be whitespace only')

		if self.image_tag_mutability not in TAG_MUTABILITY_VALUES:
			raise ConfigurationError(
				'image_tag_mutability', f'must be one of {", ".join(TAG_MUTABILITY_VALUES)}'
			)

		if self.max_image_count is not None:
			if isinstance(self.max_image_count, bool) or not isinstance(self.max_image_count, int):
				raise ConfigurationError('max_image_count', 'must be an integer')
			if self.max_image_count < 1:
				raise ConfigurationError('max_image_count', 'must be at least 1')

		tags = dict(self.tags or {})
		for key, value in tags.items():
			if key not in REQUIRED_TAG_KEYS:
				raise ConfigurationError('tags', f"unknown tag key '{key}'")
			if not isinstance(value, str):
				raise ConfigurationError(key.lower(), 'must be a string')
		object.__setattr__(self, 'tags', MappingProxyType(tags))

	@classmethod
	def from_settings(cls, settings: Dict[str, Any]) -> 'RegistryConfig':
		"""
		Build a RegistryConfig from the 'registry' block of settings.json.

		Args:
		    settings: Mapping using the settings file keys

		Returns:
		    RegistryConfig: The validated configuration

		Raises:
		    ConfigurationError: If a value is missing or invalid
		"""
		if not isinstance(settings, dict):
			raise ConfigurationError('registry', 'must be an object')

		tags = {}
		for setting_key, tag_key in TAG_SETTING_KEYS.items():
			if settings.get(setting_key) is not None:
				tags[tag_key] = settings[setting_key]

		return cls(
			name=settings.get('repository_name'),
			scan_on_push=settings.get('enable_image_scanning', True),
			use_managed_key_encryption=settings.get('enable_kms_encryption', False),
			external_key_reference=settings.get('kms_key', ''),
			tags=tags,
			image_tag_mutability=settings.get('image_tag_mutability', 'MUTABLE'),
			max_image_count=settings.get('max_image_count'),
			force_delete=settings.get('force_delete', False),
		)
