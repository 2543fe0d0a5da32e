"""
Unit tests for the repository_policy module.
"""

import json

import pytest

from ecr_registry.resources.repository_policy import (
	ALLOW_ANY_PRINCIPAL,
	PUSH_PULL_ACTIONS,
	build_access_policy,
)

EXPECTED_ACTIONS = {
	'ecr:BatchCheckLayerAvailability',
	'ecr:CompleteLayerUpload',
	'ecr:GetDownloadUrlForLayer',
	'ecr:InitiateLayerUpload',
	'ecr:PutImage',
	'ecr:UploadLayerPart',
}


class TestBuildAccessPolicy:
	"""Tests for build_access_policy."""

	def test_policy_schema(self):
		"""Test that the policy has Version and a single Allow statement."""
		# When: We build the policy for a repository
		declaration = build_access_policy('my-repo').to_document()

		# Then: It is bound to the repository and follows the policy schema
		assert declaration['repository'] == 'my-repo'
		policy = declaration['policy']
		assert policy['Version'] == '2012-10-17'
		assert len(policy['Statement']) == 1
		statement = policy['Statement'][0]
		assert statement['Sid'] == 'AllowPushPull'
		assert statement['Effect'] == 'Allow'
		assert statement['Principal'] == '*'

	def test_actions_fixed(self):
		"""Test that the action list is exactly the six push/pull actions."""
		for name in ('my-repo', 'team/service', 'other.repo'):
			statement = build_access_policy(name).to_document()['policy']['Statement'][0]
			assert len(statement['Action']) == 6
			assert set(statement['Action']) == EXPECTED_ACTIONS

	def test_wildcard_principal_default(self):
		"""Test that the wildcard principal is the labeled default."""
		assert ALLOW_ANY_PRINCIPAL == '*'
		assert set(PUSH_PULL_ACTIONS) == EXPECTED_ACTIONS

	def test_json_serializable(self):
		"""Test that the declaration serializes to JSON."""
		declaration = build_access_policy('my-repo').to_document()

		assert json.loads(json.dumps(declaration)) == declaration

	def test_policy_is_immutable(self):
		"""Test that the declaration and its actions cannot be modified."""
		access_policy = build_access_policy('my-repo')

		with pytest.raises(AttributeError):
			access_policy.actions = ('ecr:*',)
		assert isinstance(access_policy.actions, tuple)

	def test_document_is_a_copy(self):
		"""Test that editing a rendered document leaves the declaration unchanged."""
		access_policy = build_access_policy('my-repo')
		document = access_policy.to_document()
		document['policy']['Statement'][0]['Action'].append('ecr:*')

		assert access_policy.actions == PUSH_PULL_ACTIONS
