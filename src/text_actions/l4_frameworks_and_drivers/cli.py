"""CLI entry point for llm-text-actions."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from text_actions import __version__


@click.group()
@click.option(
    '-s',
    '--settings',
    'settings_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to YAML settings file.',
)
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, settings_path: str | None, debug: bool) -> None:
    """text-actions -- translate, proofread, summarize and reshape text with an LLM."""
    ctx.ensure_object(dict)
    ctx.obj['settings_path'] = settings_path
    if debug:
        from text_actions.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: not needed for --help
        from text_actions.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
            setup_file_logging,
        )

        setup_file_logging(LOG_DIR)


def _container(ctx: click.Context):
    from text_actions.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: openai/yaml stack not loaded on --help
        DependencyContainer,
    )

    return DependencyContainer(settings_path=ctx.obj.get('settings_path'))


@cli.command()
@click.argument('action_id')
@click.argument('text', required=False)
@click.option('-f', '--from', 'input_language', default=None, help='Input language (default: from settings).')
@click.option('-t', '--to', 'output_language', default=None, help='Output language (default: from settings).')
@click.option(
    '--clipboard',
    is_flag=True,
    help='Read the input from the clipboard and copy the result back to it.',
)
@click.pass_context
def run(
    ctx: click.Context,
    action_id: str,
    text: str | None,
    input_language: str | None,
    output_language: str | None,
    clipboard: bool,
) -> None:
    """Run ACTION_ID over TEXT (or stdin, or the clipboard)."""
    from text_actions.l1_entities.action import ActionRequest  # noqa: PLC0415 -- deferred: pydantic not loaded on --help
    from text_actions.l1_entities.errors import TextActionError  # noqa: PLC0415 -- deferred: not needed for --help

    container = _container(ctx)
    try:
        settings = container.settings_store.get_current_settings()
    except TextActionError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    input_text = _read_input(text, clipboard)
    request = ActionRequest(
        id=action_id,
        input_text=input_text,
        input_language_id=input_language or settings.language_config.default_input_language,
        output_language_id=output_language or settings.language_config.default_output_language,
    )

    try:
        result = asyncio.run(container.controller.process_action(request))
    except TextActionError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if clipboard:
        import pyperclip  # noqa: PLC0415 -- deferred: clipboard backend probed only when asked

        pyperclip.copy(result)
    click.echo(result)


@cli.command()
@click.pass_context
def actions(ctx: click.Context) -> None:
    """List available actions grouped by category."""
    from text_actions.l1_entities.errors import TextActionError  # noqa: PLC0415 -- deferred: not needed for --help

    try:
        groups = _container(ctx).controller.get_action_groups()
    except TextActionError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    for group in groups.action_groups:
        click.echo(f'{group.group_name} [{group.group_id}]')
        for action in group.group_actions:
            click.echo(f'  {action.id:<24} {action.text}')


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Preflight: check the active provider is reachable and serves the configured model."""
    from text_actions.l1_entities.errors import TextActionError  # noqa: PLC0415 -- deferred: not needed for --help

    container = _container(ctx)
    try:
        settings = container.settings_store.get_current_settings()
    except TextActionError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    provider = settings.current_provider_config
    model = settings.llm_config.model_name
    click.echo(f'Provider: {provider.provider_name} ({provider.provider_type.value}) at {provider.base_url}')
    click.echo(f'Model: {model}')

    try:
        ok, missing = _preflight(container, provider.provider_type.value, model)
    except TextActionError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    if not ok:
        sys.exit(1)
    if missing:
        click.echo(f"Warning: model '{model}' not advertised by the provider; requests may still work.", err=True)
    else:
        click.echo('OK')


def _preflight(container, provider_type: str, model: str) -> tuple[bool, bool]:
    """Returns (reachable, model_missing)."""
    if provider_type == 'ollama':
        probe = container.ollama_probe()
        ok, err = probe.check_connectivity()
        if not ok:
            click.echo(f'Warning: Ollama not reachable ({err}).', err=True)
            return False, False
        return True, bool(probe.check_models([model]))

    ok, err = container.transport.check_connectivity()
    if not ok:
        click.echo(f'Warning: provider not reachable ({err}).', err=True)
        return False, False
    models = asyncio.run(container.transport.get_models_list())
    return True, model not in models


@cli.command()
@click.option('--force', is_flag=True, help='Overwrite an existing settings file.')
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a default settings file."""
    from text_actions.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: not needed for --help
        DEFAULT_SETTINGS_PATHS,
    )
    from text_actions.l3_interface_adapters.gateways.yaml_settings_store import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlSettingsStore,
    )
    from text_actions.l4_frameworks_and_drivers.settings_defaults import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_settings,
    )

    settings_path = ctx.obj.get('settings_path')
    target = Path(settings_path) if settings_path else DEFAULT_SETTINGS_PATHS[0]
    if target.exists() and not force:
        click.echo(f'Error: {target} already exists (use --force to overwrite).', err=True)
        sys.exit(1)
    path = YamlSettingsStore(str(target)).save_settings(build_settings({}))
    click.echo(f'Wrote {path}')


def _read_input(text: str | None, clipboard: bool) -> str:
    if clipboard:
        import pyperclip  # noqa: PLC0415 -- deferred: clipboard backend probed only when asked

        return pyperclip.paste()
    if text is None or text == '-':
        return sys.stdin.read()
    return text
