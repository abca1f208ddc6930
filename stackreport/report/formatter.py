"""Render command output into a collapsible PR comment.

Layout (markdown):

    #### :tropical_drink: `<command>` on <stack>

    <details>
    <summary>Click to expand Pulumi report</summary>

    ```
    <output, at most MAX_OUTPUT_BYTES bytes>
    ```
    **Warn**: The output was too long and trimmed.   (only when truncated)
    </details>

Everything up to and including the summary line is the identity prefix;
later runs find their comment by it, so it must not change between runs.
"""

from stackreport.models import RenderedComment

MAX_OUTPUT_BYTES = 64_000

SUMMARY = "Click to expand Pulumi report"
TRUNCATION_WARNING = "**Warn**: The output was too long and trimmed."
FENCE = "```"


def identity_prefix(command: str, stack_name: str) -> str:
    """Return the header every comment for (command, stack_name) starts
    with."""
    return f"#### :tropical_drink: `{command}` on {stack_name}\n\n<details>\n<summary>{SUMMARY}</summary>"


def truncate_output(output: str) -> tuple[str, bool]:
    """Cut output to its first MAX_OUTPUT_BYTES UTF-8 bytes.

    Characters UTF-8 cannot encode (lone surrogates) become "?". A
    character split by the cut is dropped. The flag is set whenever the
    cut slice is exactly MAX_OUTPUT_BYTES long, which includes output that
    was exactly that size to begin with.

    Returns:
        (text, truncated)
    """
    raw = output.encode("utf-8", errors="replace")[:MAX_OUTPUT_BYTES]
    # TODO: flag only when bytes were actually removed (len(encoded) > MAX_OUTPUT_BYTES)
    truncated = len(raw) == MAX_OUTPUT_BYTES
    return raw.decode("utf-8", errors="ignore"), truncated


def render_report(command: str, stack_name: str, output: str) -> RenderedComment:
    """Build the comment body for one command run.

    Args:
        command: Command that produced the output (e.g. "up").
        stack_name: Stack the command ran against.
        output: Raw command output, any length.

    Returns:
        RenderedComment with the identity prefix, full body and truncation
        flag.
    """
    prefix = identity_prefix(command, stack_name)
    text, truncated = truncate_output(output)
    # The blank line after the prefix is required or the fence is not rendered
    lines = [prefix, "", FENCE, text, FENCE]
    if truncated:
        lines.append(TRUNCATION_WARNING)
    lines.append("</details>")
    return RenderedComment(identity_prefix=prefix, body="\n".join(lines), truncated=truncated)
