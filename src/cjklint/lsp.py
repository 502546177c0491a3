"""Minimal LSP server for cjklint: validations as diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_SAVE,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from cjklint import format
from cjklint.config import load_config, resolve_rules
from cjklint.errors import OptionsError
from cjklint.tokens import locate

server = LanguageServer("cjklint-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _rules_for(path: str | None) -> dict[str, Any]:
    """Rules from the cjklint.toml beside the document, else the default preset."""
    config: dict[str, Any] = {}
    if path:
        config = load_config(None, Path(path).parent)
    preset = None
    if "preset" not in config and "rules" not in config:
        preset = "default"
    return resolve_rules(config, None, preset)


def _client_position(source: str, offset: int) -> Position:
    """0-based line and UTF-16 column, the units LSP clients count in."""
    pos = locate(source, offset)
    prefix = source[pos.offset - pos.column + 1 : pos.offset]
    return Position(line=pos.line - 1, character=len(prefix.encode("utf-16-le")) // 2)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run the formatter over the document and publish its validations."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        rules = _rules_for(doc.path)
    except OptionsError as exc:
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=0, character=0),
                    end=Position(line=0, character=0),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="cjklint",
            )
        )
    else:
        for validation in format(source, {"rules": rules}).validations:
            diagnostics.append(
                Diagnostic(
                    range=Range(
                        start=_client_position(source, validation.index),
                        end=_client_position(source, validation.index + validation.length),
                    ),
                    message=validation.message,
                    severity=DiagnosticSeverity.Warning,
                    source="cjklint",
                    code=validation.rule or None,
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


@server.feature(TEXT_DOCUMENT_DID_SAVE)
def did_save(ls: LanguageServer, params: DidSaveTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
