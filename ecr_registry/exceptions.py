"""
Error types for the ECR registry module.

Configuration problems are detected locally and raised before any construct
is created. Failures reported by CloudFormation or the ECR API are passed
through unchanged.
"""


class ConfigurationError(ValueError):
	"""
	Raised when the registry configuration is invalid.

	Attributes:
	    field: Name of the offending configuration key
	"""

	def __init__(self, field: str, message: str):
		self.field = field
		super().__init__(f'{field}: {message}')


class ExternalEngineError(RuntimeError):
	"""Raised when the provisioning engine reports a failure. The message is the engine's own."""
