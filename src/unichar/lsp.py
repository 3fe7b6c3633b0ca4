"""Minimal LSP server for unichar: character hover and unprintable diagnostics."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from unichar.char import Character, decompose
from unichar.display import display_width, format_char
from unichar.measure import calculate_position, iter_graphemes

server = LanguageServer("unichar-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def char_at(source: str, offset: int) -> Character | None:
    """Return the Character whose grapheme covers *offset* in *source*."""
    for start, cluster in iter_graphemes(source):
        if start <= offset < start + len(cluster):
            return Character(
                cluster,
                is_substring=True,
                position=calculate_position(source, start),
            )
        if start > offset:
            break
    return None


def hover_text(char: Character) -> str:
    """Markdown shown when hovering over *char*."""
    code_points = " ".join(f"U+{cp:04X}" for cp in char.code_points)
    lines = [
        "```",
        format_char(char),
        "```",
        f"code points: `{code_points}`",
        f"width: {display_width(char)}",
    ]
    numeric = char.get_numeric_value()
    if numeric >= 0:
        lines.append(f"numeric value: {numeric}")
    return "\n\n".join(lines)


def _client_position(doc: TextDocument, offset: int) -> Position:
    """Convert a string offset into an LSP position in client units."""
    lines = doc.lines
    if not lines:
        return Position(line=0, character=0)

    line_start = 0
    line = 0
    for line, text in enumerate(lines):
        if offset < line_start + len(text):
            break
        line_start += len(text)
    else:
        # Past the end: a final terminator opens an empty last line
        if lines[-1].endswith(("\n", "\r")):
            return Position(line=len(lines), character=0)
        # otherwise clamp to the end of the last line
        line_start -= len(lines[-1])
        offset = min(offset, line_start + len(lines[-1]))
    pos = Position(line=line, character=offset - line_start)
    return doc.position_codec.position_to_client_units(doc.lines, pos)


def _hover(ls: LanguageServer, params: HoverParams) -> Hover | None:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    offset = doc.offset_at_position(params.position)
    char = char_at(doc.source, offset)
    if char is None:
        return None

    start = char.position.index
    return Hover(
        contents=MarkupContent(kind=MarkupKind.Markdown, value=hover_text(char)),
        range=Range(
            start=_client_position(doc, start),
            end=_client_position(doc, start + len(char.value)),
        ),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Publish a warning for every character that only renders as a code point escape."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for char in decompose(doc.source):
        if not char.to_string().startswith("\\u{"):
            continue
        start = char.position.index
        code_points = " ".join(f"U+{cp:04X}" for cp in char.code_points)
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=_client_position(doc, start),
                    end=_client_position(doc, start + len(char.value)),
                ),
                message=f"unprintable control character {code_points}",
                severity=DiagnosticSeverity.Warning,
                source="unichar",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LanguageServer, params: HoverParams) -> Hover | None:
    return _hover(ls, params)


def main() -> None:
    server.start_io()
