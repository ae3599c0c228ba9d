"""Command-line interface for gql-mddoc."""

import json
import logging
from pathlib import Path

import click
import httpx

from .core.auth import Auth, BearerAuth, CombinedAuth, HeaderAuth
from .core.config import OutputConfig, RenderConfig
from .core.decoder import decode_schema
from .core.errors import GqlMdDocError
from .core.fetch import fetch_introspection
from .core.generator import DocGenerator
from .core.hooks import FilterTypesHook, FrontMatterHook, HookRunner
from .core.loader import load_schema
from .core.writer import DocWriter


def build_auth(headers: tuple[str, ...], token: str | None) -> Auth:
    """Build the auth handler from --header and --token options."""
    try:
        handlers: list[Auth] = [HeaderAuth.from_strings(list(headers))]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--header'")
    if token:
        handlers.append(BearerAuth(token))
    return CombinedAuth(*handlers)


def parse_variables(values: tuple[str, ...]) -> dict[str, str]:
    """Parse --var key=value options."""
    variables = {}
    for value in values:
        key, sep, val = value.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"{value!r} is not key=value", param_hint="'--var'")
        variables[key.strip()] = val
    return variables


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _common_fetch_options(func):
    func = click.option(
        "--token",
        envvar="GQL_MDDOC_TOKEN",
        help="Bearer token for the endpoint (or set GQL_MDDOC_TOKEN).",
    )(func)
    func = click.option(
        "--header",
        "-H",
        "headers",
        multiple=True,
        help='Extra request header, "Name: value". Repeatable.',
    )(func)
    return func


@click.group()
@click.version_option(package_name="gql-mddoc")
def main():
    """Markdown documentation generator for GraphQL schemas.

    Reads an introspection result (from a URL, a JSON file or SDL files) and
    writes markdown grouped by queries, mutations, subscriptions, objects,
    inputs, interfaces, enums, unions and scalars.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True),
    help="Introspection JSON file, GraphQL SDL file, or directory of SDL files.",
)
@click.option("--url", "-u", help="GraphQL endpoint to introspect.")
@_common_fetch_options
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output file, or directory with --multiple-files. [default: schema.md, or docs with -m]",
)
@click.option(
    "--multiple-files",
    "-m",
    is_flag=True,
    help="Write one file per category instead of a single file.",
)
@click.option(
    "--front-matter",
    type=click.Path(exists=True, dir_okay=False),
    help="Jinja2 template prepended to every written file.",
)
@click.option(
    "--var",
    "variables",
    multiple=True,
    help="Front matter variable, key=value. Repeatable.",
)
@click.option("--include-directives", is_flag=True, help="Document directives too.")
@click.option(
    "--exclude-builtin-scalars",
    is_flag=True,
    help="Leave String, Int, Float, Boolean and ID out of the scalars section.",
)
@click.option("--exclude-prefix", help="Skip types whose name starts with this prefix.")
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def generate(
    schema: str | None,
    url: str | None,
    headers: tuple[str, ...],
    token: str | None,
    output: str | None,
    multiple_files: bool,
    front_matter: str | None,
    variables: tuple[str, ...],
    include_directives: bool,
    exclude_builtin_scalars: bool,
    exclude_prefix: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate markdown documentation from a GraphQL schema.

    Examples:

        gql-mddoc generate --url https://api.example.com/graphql -o docs/schema.md

        gql-mddoc generate -s introspection.json -o docs --multiple-files

        gql-mddoc generate -s ./schema.graphql --front-matter fm.j2 --var weight=10
    """
    _configure_logging(verbose)
    if bool(schema) == bool(url):
        raise click.UsageError("Pass exactly one of --schema or --url.")
    if output is None:
        output = "docs" if multiple_files else "schema.md"

    render_config = RenderConfig(
        include_builtin_scalars=not exclude_builtin_scalars,
        include_directives=include_directives,
        template_dir=template_dir,
    )
    output_config = OutputConfig(
        output=Path(output).resolve(),
        multiple_files=multiple_files,
        front_matter=Path(front_matter).read_text(encoding="utf-8") if front_matter else None,
        variables=parse_variables(variables),
    )

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))

    try:
        if output_config.front_matter is not None:
            hooks.add_post_hook(FrontMatterHook(output_config.front_matter, output_config.variables))

        if url:
            click.echo(f"Introspecting {url}...")
            payload = fetch_introspection(url, build_auth(headers, token))
        else:
            click.echo(f"Loading {schema}...")
            payload = load_schema(schema)

        click.echo("Decoding schema...")
        document = decode_schema(payload)
        if verbose:
            click.echo(f"  Types: {len(document)}")
            click.echo(f"  Directives: {len(document.directives)}")

        click.echo("Rendering markdown...")
        rendered = DocGenerator(document, render_config, hooks).generate()
        if verbose:
            for category, text in rendered:
                click.echo(f"  {category.heading}: {len(text.splitlines())} lines")

        writer = DocWriter(output_config.output, output_config.multiple_files, hooks)
        written = writer.write(rendered)
    except (GqlMdDocError, httpx.HTTPError, OSError) as e:
        raise click.ClickException(str(e)) from e

    for path in written:
        click.echo(f"Wrote {path}")
    click.echo(f"Done! Generated {len(written)} file(s).")


@main.command()
@click.option("--url", "-u", required=True, help="GraphQL endpoint to introspect.")
@_common_fetch_options
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="File to save the raw introspection JSON to.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def introspect(url: str, headers: tuple[str, ...], token: str | None, output: str, verbose: bool):
    """Save the raw introspection result of an endpoint as JSON.

    Example:

        gql-mddoc introspect -u https://api.example.com/graphql -o introspection.json
    """
    _configure_logging(verbose)
    try:
        payload = fetch_introspection(url, build_auth(headers, token))
        # Decode once so a broken result fails here instead of at generate time
        decode_schema(payload)

        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except (GqlMdDocError, httpx.HTTPError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Done! Saved introspection result to {output_path}")


if __name__ == "__main__":
    main()
