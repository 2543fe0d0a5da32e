import json

from ecr_registry.exceptions import ConfigurationError


def get_config(json_dir):
	"""
	Load a JSON configuration file.

	Args:
	    json_dir: Path to the JSON file

	Returns:
	    The loaded JSON configuration as a Python object
	"""
	with open(json_dir, 'r') as json_file:
		config = json.load(json_file)
		return config


def get_registry_settings(settings):
	"""
	Return the 'registry' block of the settings.

	Args:
	    settings: The loaded settings.json object

	Returns:
	    The registry settings dictionary

	Raises:
	    ConfigurationError: If the block is missing
	"""
	registry = settings.get('registry')
	if registry is None:
		raise ConfigurationError('registry', 'is required in settings.json')
	return registry
