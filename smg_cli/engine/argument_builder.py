from __future__ import annotations

from typing import List, Sequence

from smg_cli.engine.invocation_options import InvocationOptions

# Flags forwarded when the engine is driven from the command line.
DIRECT_KEY_ORDER: Sequence[str] = (
    "model",
    "tables",
    "diagram",
    "schemaOutput",
    "dataOutput",
    "syntheticGenerate",
    "mockApiKey",
)

# The prompts never ask for diagram, schemaOutput or mockApiKey.
INTERACTIVE_KEY_ORDER: Sequence[str] = (
    "model",
    "tables",
    "dataOutput",
    "syntheticGenerate",
)


class ArgumentBuilder:
    """Turns an ``InvocationOptions`` record into the engine's argv tail."""

    def __init__(self, key_order: Sequence[str] = DIRECT_KEY_ORDER):
        unknown = set(key_order) - set(InvocationOptions.flag_names())
        if unknown:
            raise ValueError(f"Unknown engine flags: {', '.join(sorted(unknown))}")
        self.key_order = tuple(key_order)

    def build(self, options: InvocationOptions) -> List[str]:
        """Emit ``-flag value`` pairs for present values in ``key_order``.

        Values are passed through untouched; no quoting and no validation.
        """
        args: List[str] = []
        for flag in self.key_order:
            value = options.get(flag)
            if value:
                args.extend([f"-{flag}", value])
        return args


def build_direct_args(options: InvocationOptions) -> List[str]:
    return ArgumentBuilder(DIRECT_KEY_ORDER).build(options)


def build_interactive_args(options: InvocationOptions) -> List[str]:
    return ArgumentBuilder(INTERACTIVE_KEY_ORDER).build(options)
