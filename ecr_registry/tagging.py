"""
Tag handling for the ECR registry module.

Every registry carries the same five cost-allocation tags. Values come from
the configuration and fall back to placeholder defaults when unset.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

# Settings key -> tag key
TAG_SETTING_KEYS = MappingProxyType(
	{
		'company': 'Company',
		'app': 'App',
		'env': 'Env',
		'owner': 'Owner',
		'costcenter': 'CostCenter',
	}
)

DEFAULT_TAGS = MappingProxyType(
	{
		'Company': 'YourCompany',
		'App': 'YourApp',
		'Env': 'dev',
		'Owner': 'owner@example.com',
		'CostCenter': 'CC-0000',
	}
)

REQUIRED_TAG_KEYS = frozenset(DEFAULT_TAGS)


def build_tag_set(overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
	"""
	Merge configured tag values over the defaults.

	Args:
	    overrides: Tag values keyed by tag key (e.g. 'Company'). Keys outside
	        the required set are ignored.

	Returns:
	    Dict with exactly the five required tag keys
	"""
	tags = dict(DEFAULT_TAGS)
	for key, value in (overrides or {}).items():
		if key in REQUIRED_TAG_KEYS and value is not None:
			tags[key] = value
	return tags
