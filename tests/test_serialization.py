from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from lox.main import scan_source
from lox.serialization import artifacts_to_json, token_to_dict, tokens_to_json, write_tokens


class SerializationTests(unittest.TestCase):
    def test_token_to_dict(self) -> None:
        tokens = scan_source('"hi" 3').tokens
        self.assertEqual(token_to_dict(tokens[0]), {'type': 'STRING', 'lexeme': '"hi"', 'literal': 'hi', 'line': 1})
        self.assertEqual(token_to_dict(tokens[1])['literal'], 3.0)
        self.assertEqual(token_to_dict(tokens[2]), {'type': 'EOF', 'lexeme': '', 'literal': None, 'line': 1})

    def test_tokens_to_json(self) -> None:
        payload = json.loads(tokens_to_json(scan_source('a;').tokens))
        self.assertEqual([item['type'] for item in payload], ['IDENTIFIER', 'SEMICOLON', 'EOF'])

    def test_artifacts_to_json_includes_diagnostics(self) -> None:
        payload = json.loads(artifacts_to_json(scan_source('@', filename='x.lox')))
        self.assertEqual(payload['file'], 'x.lox')
        self.assertFalse(payload['ok'])
        self.assertEqual(payload['diagnostics'][0]['code'], 'LEX001')
        self.assertEqual(payload['tokens'][0]['type'], 'EOF')

    def test_write_tokens(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / 'tokens.json'
            write_tokens(scan_source('nil').tokens, target)
            payload = json.loads(target.read_text(encoding='utf-8'))
            self.assertEqual(payload[0]['type'], 'NIL')


if __name__ == '__main__':
    unittest.main()
