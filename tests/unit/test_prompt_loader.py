"""
Unit tests for template loading and placeholder substitution.
"""
import os

import pytest

from nerf.domain.exceptions import PromptFileError
from nerf.services.prompt_loader import PLACEHOLDER, fill_prompt, join_words, load_prompt


class TestFillPrompt:

    def test_single_placeholder(self):
        assert fill_prompt('Rewrite: {input}', ['fix', 'this', 'sentence']) == 'Rewrite: fix this sentence'

    def test_every_occurrence_replaced(self):
        template = '{input}\n---\n{input}!'
        assert fill_prompt(template, ['a', 'b']) == 'a b\n---\na b!'

    def test_template_without_placeholder_unchanged(self):
        template = 'No token here, just {braces} and text.\n'
        assert fill_prompt(template, ['ignored']) == template

    def test_no_recursive_substitution(self):
        assert fill_prompt('<{input}>', [PLACEHOLDER]) == '<{input}>'

    def test_words_inserted_verbatim(self):
        words = ['see', 'https://x.io/a?b=1', '@bob', '#general', '$HOME', '\\n']
        assert fill_prompt('[{input}]', words) == '[' + ' '.join(words) + ']'

    def test_surrounding_whitespace_preserved(self):
        assert fill_prompt('  {input}\t\n', ['x']) == '  x\t\n'


class TestJoinWords:

    def test_single_space_separator(self):
        assert join_words(['one', 'two']) == 'one two'

    def test_words_containing_spaces_kept(self):
        assert join_words(['already spaced', 'x']) == 'already spaced x'


class TestLoadPrompt:

    def test_reads_file(self, tmp_path):
        path = tmp_path / 'prompt'
        path.write_text('Make it polite: {input}\n', encoding='utf-8')
        assert load_prompt(str(path)) == 'Make it polite: {input}\n'

    def test_tilde_is_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv('HOME', str(tmp_path))
        config_dir = tmp_path / '.config' / 'nerf'
        config_dir.mkdir(parents=True)
        (config_dir / 'prompt').write_text('{input}', encoding='utf-8')

        assert load_prompt('~/.config/nerf/prompt') == '{input}'

    def test_missing_file_raises(self, tmp_path):
        missing = tmp_path / 'nope'
        with pytest.raises(PromptFileError) as exc_info:
            load_prompt(str(missing))

        assert str(missing) in str(exc_info.value)

    def test_directory_raises(self, tmp_path):
        with pytest.raises(PromptFileError):
            load_prompt(str(tmp_path))

    def test_undecodable_file_raises(self, tmp_path):
        path = tmp_path / 'binary'
        path.write_bytes(b'\xff\xfe\xfa')
        with pytest.raises(PromptFileError):
            load_prompt(str(path))

    def test_error_names_expanded_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv('HOME', str(tmp_path))
        with pytest.raises(PromptFileError) as exc_info:
            load_prompt('~/absent')

        assert os.path.join(str(tmp_path), 'absent') in str(exc_info.value)
