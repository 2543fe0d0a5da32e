"""
Repository access policy for the ECR registry module.

The policy grants push and pull to any principal. This is a permissive
default carried over from existing deployments; restrict it in accounts where
the registry must not be reachable by other principals.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from aws_cdk import aws_ecr as ecr, aws_iam as iam

POLICY_VERSION = '2012-10-17'
STATEMENT_SID = 'AllowPushPull'

# Wildcard principal. Permissive on purpose, see module docstring.
ALLOW_ANY_PRINCIPAL = '*'

PUSH_PULL_ACTIONS = (
	'ecr:BatchCheckLayerAvailability',
	'ecr:CompleteLayerUpload',
	'ecr:GetDownloadUrlForLayer',
	'ecr:InitiateLayerUpload',
	'ecr:PutImage',
	'ecr:UploadLayerPart',
)


@dataclass(frozen=True)
class AccessPolicy:
	"""
	Access policy declaration bound to one repository.

	Attributes:
	    repository (str): Name of the repository the policy is bound to
	    sid (str): Statement identifier
	    effect (str): 'Allow' or 'Deny'
	    principal (str): Principal the statement applies to
	    actions (Tuple[str, ...]): Granted actions
	"""

	repository: str
	sid: str = STATEMENT_SID
	effect: str = 'Allow'
	principal: str = ALLOW_ANY_PRINCIPAL
	actions: Tuple[str, ...] = PUSH_PULL_ACTIONS

	def to_document(self) -> Dict[str, Any]:
		"""Render the declaration with a JSON-serializable policy document."""
		return {
			'repository': self.repository,
			'policy': {
				'Version': POLICY_VERSION,
				'Statement': [
					{
						'Sid': self.sid,
						'Effect': self.effect,
						'Principal': self.principal,
						'Action': list(self.actions),
					}
				],
			},
		}


def build_access_policy(repository_name: str) -> AccessPolicy:
	"""
	Build the access policy declaration for a repository.

	Args:
	    repository_name: Name of the repository the policy is bound to

	Returns:
	    AccessPolicy: The push/pull policy bound to the repository
	"""
	return AccessPolicy(repository=repository_name)


def add_push_pull_policy(repository: ecr.Repository, access_policy: AccessPolicy) -> iam.AddToResourcePolicyResult:
	"""
	Attach an access policy statement to a repository's resource policy.

	Args:
	    repository: The ECR repository
	    access_policy: The declaration to attach

	Returns:
	    iam.AddToResourcePolicyResult: Result of adding the statement
	"""
	if access_policy.principal == ALLOW_ANY_PRINCIPAL:
		principal = iam.AnyPrincipal()
	else:
		principal = iam.ArnPrincipal(access_policy.principal)

	return repository.add_to_resource_policy(
		iam.PolicyStatement(
			sid=access_policy.sid,
			effect=iam.Effect.ALLOW if access_policy.effect == 'Allow' else iam.Effect.DENY,
			principals=[principal],
			actions=list(access_policy.actions),
		)
	)
