"""
Entry point for python -m ecs_version_gen

Allows running the package as a module:
    python -m ecs_version_gen
"""

from .cli import main

if __name__ == '__main__':
    main()
