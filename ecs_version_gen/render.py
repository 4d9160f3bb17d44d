"""
Rendering of the generated version.go file.
"""

import json

from jinja2 import Environment, StrictUndefined, TemplateError
from loguru import logger

VERSION_GO_TEMPLATE = """// This is an autogenerated file and should not be edited.

// Copyright 2015-2017 Amazon.com, Inc. or its affiliates. All Rights Reserved.
//
// Licensed under the Apache License, Version 2.0 (the "License"). You may
// not use this file except in compliance with the License. A copy of the
// License is located at
//
//	http://aws.amazon.com/apache2.0/
//
// or in the "license" file accompanying this file. This file is distributed
// on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either
// express or implied. See the License for the specific language governing
// permissions and limitations under the License.

// Package version contains constants to indicate the current version of the
// ecs-cli. It is autogenerated
package version

// Please DO NOT commit any changes to this file (specifically the hash) except
// for those created by running ./scripts/update-version at the root of the
// repository. Only the 'Version' const should change in checked-in source code

// Version is the version of the ECS CLI
const Version = {{ version | go_string }}

// GitDirty indicates the cleanliness of the git repo when this ecs-cli was built
const GitDirty = {{ dirty | go_bool }}

// GitShortHash is the short hash of this ecs-cli build
const GitShortHash = {{ hash | go_string }}
"""


class RenderError(Exception):
    """Raised when version.go cannot be rendered or written."""
    pass


def go_string(value) -> str:
    """
    Format a value as a Go interpreted string literal.

    JSON string escaping (quotes, backslashes, control characters and \\u
    escapes) is a subset of Go's string literal syntax.
    """
    return json.dumps(str(value), ensure_ascii=False)


def go_bool(value) -> str:
    """Format a value as an unquoted Go boolean literal."""
    return 'true' if value else 'false'


def _environment() -> Environment:
    env = Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters['go_string'] = go_string
    env.filters['go_bool'] = go_bool
    return env


def render_version_go(info, template: str = VERSION_GO_TEMPLATE) -> str:
    """
    Render the version.go source for a VersionInfo.

    Args:
        info: VersionInfo with version, dirty and hash fields
        template: Jinja2 template source

    Returns:
        str: Rendered Go source

    Raises:
        RenderError: If the template is malformed or references unknown values
    """
    try:
        return _environment().from_string(template).render(
            version=info.version,
            dirty=info.dirty,
            hash=info.hash,
        )
    except TemplateError as e:
        raise RenderError(f'Error applying template: {e}') from e


def write_version_go(info, path: str, template: str = VERSION_GO_TEMPLATE) -> None:
    """
    Render version.go and write it to path, replacing any existing file.

    Rendering happens before the file is opened so a template failure never
    leaves a truncated output file behind.

    Args:
        info: VersionInfo with version, dirty and hash fields
        path: Output file path
        template: Jinja2 template source

    Raises:
        RenderError: If rendering fails or the output file cannot be written
    """
    content = render_version_go(info, template)

    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
    except OSError as e:
        raise RenderError(f'Unable to create output version file: {e}') from e

    logger.debug(f'Wrote {len(content)} bytes to {path}')
