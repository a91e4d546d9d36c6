# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command Line Interface for D2R.
"""
import logging
import sys

import click

from .. import __version__
from ..errors import D2RError
from ..BUILDERS.run_command_builder import RunCommandBuilder
from ..MANAGERS.inspection_manager import InspectionManager
from ..MODELS.render_options import RenderOptions
from ..RUNNERS.docker_inspector import DockerInspector


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(name)s] %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument('container', required=False)
@click.option('--pretty', '-p', is_flag=True, help='Break the command into multiple lines')
@click.option('--stdin', '-s', 'use_stdin', is_flag=True,
              help='Read `docker container inspect` output from standard input')
@click.option('--no-name', is_flag=True, help='Do not include the container name')
@click.option('--merge-config-volumes', is_flag=True,
              help='Also rebuild volumes declared in the container config')
@click.option('--docker-bin', default='docker', envvar='D2R_DOCKER_BIN', show_default=True,
              help='Docker executable used for inspection')
@click.option('--timeout', type=float, default=None, envvar='D2R_TIMEOUT',
              help='Seconds to wait for each docker call')
@click.option('--verbose', '-v', is_flag=True, help='Log debug output to stderr')
@click.version_option(version=__version__)
def cli(container, pretty, use_stdin, no_name, merge_config_volumes, docker_bin, timeout, verbose):
    """
    D2R - Docker to Run.

    Shows the `docker run` command that recreates CONTAINER.
    """
    _configure_logging(verbose)

    manager = InspectionManager(DockerInspector(docker_bin=docker_bin, timeout=timeout))
    stream = sys.stdin if use_stdin else None
    try:
        inspect, image = manager.load(container=container, stream=stream)
    except D2RError as e:
        raise click.ClickException(str(e)) from e

    options = RenderOptions(
        include_name=not no_name,
        pretty=pretty,
        merge_config_volumes=merge_config_volumes,
    )
    click.echo(RunCommandBuilder(inspect, image, options).build())


def main():
    """
    Main entry point for the CLI.
    """
    cli()


if __name__ == '__main__':
    main()
