"""
ECS CLI Version Generator

A build-time tool that writes the ecs-cli version.go file from the VERSION
file and the state of the enclosing git repository.
"""

from ._version import __version__

__description__ = "Generate the ecs-cli version.go file from VERSION and git metadata"
