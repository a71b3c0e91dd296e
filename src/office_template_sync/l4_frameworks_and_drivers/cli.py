"""CLI entry point for office-template-sync."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from office_template_sync import __version__

EXIT_CONFIG_ERROR = 1
EXIT_TEMPLATE_FAILED = 2


def _build_overrides(folder, url, strategy, hash_algorithm) -> dict:
    """Collect CLI flags into a config-shaped dict; unset flags are left out."""
    sync: dict = {}
    if folder is not None:
        sync['folder'] = folder
    if url is not None:
        sync['download_url'] = url
    if strategy is not None:
        sync['strategy'] = strategy
    if hash_algorithm is not None:
        sync['hash_algorithm'] = hash_algorithm
    return {'sync': sync} if sync else {}


@click.command()
@click.argument('names', nargs=-1)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option('-f', '--folder', default=None, help='Sub-folder created inside each application templates directory.')
@click.option('-u', '--url', default=None, help='Base download URL; each template is fetched from <url>/<name>.')
@click.option(
    '-s',
    '--strategy',
    default=None,
    type=click.Choice(['timestamp', 'hash'], case_sensitive=False),
    help='How staleness is decided (default: hash).',
)
@click.option('--hash-algorithm', default=None, help='hashlib algorithm for the hash strategy (default: sha256).')
@click.option('--log-dir', default=None, type=click.Path(file_okay=False), help='Directory for the debug log.')
@click.option('-v', '--verbose', is_flag=True, help='Echo progress to stderr.')
@click.version_option(version=__version__)
def cli(names, config_path, folder, url, strategy, hash_algorithm, log_dir, verbose):
    """office-template-sync -- keep Office template folders in sync with a remote repository.

    NAMES are template file names such as Letter.dotx, Budget.xltx or Deck.potx.
    When omitted, ``sync.templates`` from the config file is used.
    """
    from office_template_sync.l1_entities.errors import ConfigurationError  # noqa: PLC0415 -- deferred: not needed for --help
    from office_template_sync.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help
        LOG_DIR,
    )
    from office_template_sync.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from office_template_sync.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
    )
    from office_template_sync.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_logging,
    )
    from office_template_sync.l4_frameworks_and_drivers.sync_runner import (  # noqa: PLC0415 -- deferred: httpx not loaded on --help
        config_from_values,
        run_sync,
    )

    overrides = _build_overrides(folder, url, strategy, hash_algorithm)
    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides or None)
        config = config_from_values(raw)
        infra = InfraConfig.model_validate(raw)
    except (FileNotFoundError, ValueError, ConfigurationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    template_names = list(names) or list(config.sync.templates)
    if not template_names:
        click.echo('Error: no template names given (pass NAMES or set sync.templates).', err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    setup_logging(Path(log_dir) if log_dir else LOG_DIR, verbose=verbose)

    try:
        results = run_sync(config, template_names, infra)
    except ConfigurationError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    _report(results)
    if any(not r.ok for r in results):
        sys.exit(EXIT_TEMPLATE_FAILED)


def _report(results) -> None:
    from office_template_sync.l3_interface_adapters.controllers.sync_controller import (  # noqa: PLC0415 -- deferred: only after a run
        format_result,
        summarize,
    )

    for result in results:
        click.echo(format_result(result))
    click.echo(summarize(results))
