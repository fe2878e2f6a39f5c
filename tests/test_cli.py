"""
Tests for the shellvars command line.
"""

import json

import pytest

from shellvars.cli.main import create_parser, main


class TestWordCommand:
    """Test `shellvars word`."""

    def test_word_with_vars(self, capsys):
        exit_code = main(['word', '--var', 'foo=bar', '${foo}baz', '"$foo"'])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ['barbaz', 'bar']

    def test_array_var(self, capsys):
        exit_code = main(['word', '--var', 'arr=(x y z)', '$arr'])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ['x y z']

    def test_vars_reference_earlier_vars(self, capsys):
        exit_code = main(['word', '--var', 'a=1', '--var', 'b=${a}2', '$b'])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ['12']

    def test_unresolved_removed(self, capsys):
        assert main(['word', 'a${missing}b']) == 0
        assert capsys.readouterr().out.splitlines() == ['ab']

    def test_no_substitute(self, capsys):
        assert main(['word', '--no-substitute', '--var', 'foo=bar', "'$foo'", '$foo']) == 0
        assert capsys.readouterr().out.splitlines() == ['$foo', '$foo']

    def test_json_output(self, capsys):
        assert main(['word', '--json', '--var', 'foo=bar', '$foo', 'x']) == 0
        assert json.loads(capsys.readouterr().out) == ['bar', 'x']

    def test_invalid_var_exit_code(self, capsys):
        assert main(['word', '--var', 'novalue', 'x']) == 2
        assert capsys.readouterr().out == ''


class TestArrayCommand:
    """Test `shellvars array`."""

    def test_array(self, capsys):
        exit_code = main(['array', '--var', 'foo=1', "($foo 'b c' d)"])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ['1', 'b c', 'd']

    def test_vars_file(self, tmp_path, capsys):
        vars_file = tmp_path / "vars.yaml"
        vars_file.write_text("name: demo\nlist: [a, b]\n")

        exit_code = main(['array', '--json', '--vars-file', str(vars_file), '($name $list)'])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == ['demo', 'a b']

    def test_source_file(self, tmp_path, capsys):
        source = tmp_path / "build.conf"
        source.write_text("pkgname=demo\npkgver=2\n")

        exit_code = main(['array', '--json', '--source', str(source), '("$pkgname-$pkgver")'])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == ['demo-2']

    def test_var_overrides_files(self, tmp_path, capsys):
        vars_file = tmp_path / "vars.yaml"
        vars_file.write_text("name: from-yaml\nother: kept\n")
        source = tmp_path / "build.conf"
        source.write_text("name=from-source\n")

        exit_code = main([
            'array', '--json',
            '--vars-file', str(vars_file),
            '--source', str(source),
            '--var', 'name=from-var',
            '($name $other)',
        ])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == ['from-var', 'kept']

    def test_missing_vars_file(self, tmp_path):
        assert main(['array', '--vars-file', str(tmp_path / 'nope.yaml'), '(a)']) == 1

    def test_invalid_vars_file(self, tmp_path):
        vars_file = tmp_path / "vars.yaml"
        vars_file.write_text("- not\n- a mapping\n")
        assert main(['array', '--vars-file', str(vars_file), '(a)']) == 2


class TestTokenizeCommand:
    """Test `shellvars tokenize`."""

    def test_tokenize_keeps_quotes_and_references(self, capsys):
        assert main(['tokenize', "('a b' $c)"]) == 0
        assert capsys.readouterr().out.splitlines() == ["'a b'", '$c']

    def test_tokenize_json(self, capsys):
        assert main(['tokenize', '--json', '(a  b)']) == 0
        assert json.loads(capsys.readouterr().out) == ['a', 'b']


class TestParser:
    """Test argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert 'usage' in capsys.readouterr().out

    def test_word_requires_words(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(['word'])

    def test_log_level_choices(self):
        args = create_parser().parse_args(['word', '--log-level', 'debug', 'x'])
        assert args.log_level == 'debug'

    def test_quiet_help_describes_logging(self, capsys):
        with pytest.raises(SystemExit):
            main(['word', '--help'])
        assert 'Only log errors' in capsys.readouterr().out
