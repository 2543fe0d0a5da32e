#!/usr/bin/env python3
"""
Main CDK application for the ECR registry module

This module serves as the entry point for deploying the registry. It reads
the configuration file, validates the registry settings and creates the
registry stack in the configured AWS region.
"""

import logging
import os
import cdk_nag
import aws_cdk as cdk

from ecr_registry.registry_config import RegistryConfig
from ecr_registry.registry_stack import RegistryStack, RegistryStackProps
from ecr_registry.utils.config_utils import get_config, get_registry_settings
from ecr_registry.utils.logging_utils import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

settings = get_config('./configuration/settings.json')
stack_name = settings['stack_name']

# Invalid settings raise ConfigurationError here, before any stack exists
registry_props = RegistryStackProps(config=RegistryConfig.from_settings(get_registry_settings(settings)))
logger.info(f'Registry configuration is valid for repository {registry_props.config.name}')

app = cdk.App()

env = cdk.Environment(
	account=os.getenv('CDK_DEFAULT_ACCOUNT'),
	region=settings.get('region') or os.getenv('CDK_DEFAULT_REGION'),
)

RegistryStack(
	app,
	f'{stack_name}-RegistryStack',
	props=registry_props,
	env=env,
)

# Adding cdk-nag checks
cdk.Aspects.of(app).add(cdk_nag.AwsSolutionsChecks())

app.synth()
