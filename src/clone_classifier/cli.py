"""CLI entry point for clone-classifier tool."""

import logging

import click

from clone_classifier.commands import classify, evaluate


@click.group()
@click.version_option(version="0.1.0", prog_name="clone-classifier")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose):
    """Clone Type Classification Tool.

    Classifies pairs of methods as Type-1, Type-2 or Type-3 clones or as
    false positives by aligning their lines, tokens or syntax-tree leaves.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(classify.classify)
main.add_command(evaluate.evaluate)


if __name__ == "__main__":
    main()
