import pytest

from permgroups import (
    CyclePermutation, EmptyCycleError, InvalidCharacterError,
    MissingOpenError, ParseError, Permutation, StraySeparatorError,
    StrayTerminatorError, UnterminatedCycleError, parse_perm,
    parse_perm_list, parse_perm_regex, perm, string_to_cycles)


class TestStringToCycles:
    @pytest.mark.parametrize('text, expected', [
        ('(1,2)', [[1, 2]]),
        ('(1,2,3)(4,5)', [[1, 2, 3], [4, 5]]),
        ('( 1 , 2 ) (3,4)', [[1, 2], [3, 4]]),
        ('(10,2)', [[10, 2]]),
        ('(7)', [[7]]),
        ('', []),
    ])
    def test_valid(self, text, expected):
        assert string_to_cycles(text) == expected

    @pytest.mark.parametrize('text, error', [
        ('(1,)', StraySeparatorError),
        ('(,2)', StraySeparatorError),
        ('(1 2)', StraySeparatorError),
        ('()', EmptyCycleError),
        ('(1,2', UnterminatedCycleError),
        ('(1,(2)', UnterminatedCycleError),
        ('2,1)', MissingOpenError),
        ('2', MissingOpenError),
        ('(1,2)3', MissingOpenError),
        ('2;1', InvalidCharacterError),
        ('(1,-2)', InvalidCharacterError),
        (')', StrayTerminatorError),
        ('(1,2))', StrayTerminatorError),
    ])
    def test_invalid(self, text, error):
        with pytest.raises(error):
            string_to_cycles(text)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            string_to_cycles('(1,')

    def test_error_position(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            string_to_cycles('(1,2;3)')
        assert excinfo.value.position == 4
        assert excinfo.value.text == '(1,2;3)'


class TestParsePerm:
    def test_cycles_compose_left_to_right(self):
        p = parse_perm('(1,2)(2,3)')
        assert p.images() == (3, 1, 2)

    @pytest.mark.parametrize('text', ['', '  ', '()', '(1)', '(2)(5)'])
    def test_identity(self, text):
        assert parse_perm(text).is_one()

    def test_representation(self):
        p = parse_perm('(1,2,3)', CyclePermutation)
        assert isinstance(p, CyclePermutation)
        assert p == perm('(1,2,3)')

    @pytest.mark.parametrize('text', [
        '()', '(1,2)', '(1,3)(2,4)', '(1,2,3,4,5)', '(2,5,3)'])
    def test_round_trip(self, text):
        assert str(perm(text)) == text

    def test_invalid(self):
        with pytest.raises(ParseError):
            perm('(1,2')


class TestParsePermRegex:
    @pytest.mark.parametrize('text', [
        '(1,2)', '(1,2)(2,3)', '( 1, 2)(3 ,4)', '', '()'])
    def test_agrees_with_strict_parser(self, text):
        assert parse_perm_regex(text) == parse_perm(text)

    @pytest.mark.parametrize('text', [
        '(1,)', '(,2)', '(1,2', '2,1)', '2;1', '(1,2)x'])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parse_perm_regex(text)


class TestParsePermList:
    def test_list(self):
        assert parse_perm_list('(1,2), (1,2,3)(4,5)') == [
            Permutation([2, 1]), perm('(1,2,3)(4,5)')]

    def test_whitespace_separated(self):
        assert parse_perm_list('(1,2) (3,4)\n()') == [
            perm('(1,2)'), perm('(3,4)'), perm('')]

    def test_empty(self):
        assert parse_perm_list('') == []

    def test_invalid(self):
        with pytest.raises(ParseError):
            parse_perm_list('(1,2), 3')
