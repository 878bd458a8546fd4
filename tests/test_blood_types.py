import pytest

from donormatch.utils.blood_types import (
    BOMBAY, COMPATIBILITY, canonical_blood_type, compatibility_score, compatible_donor_types, is_compatible
)


@pytest.mark.parametrize('blood_type', sorted(COMPATIBILITY))
def test_every_type_can_receive_its_own_type(blood_type):
    assert blood_type in compatible_donor_types(blood_type)


@pytest.mark.parametrize('blood_type', sorted(COMPATIBILITY))
def test_exact_match_scores_100(blood_type):
    assert compatibility_score(blood_type, blood_type) == 100


def test_other_compatible_pairs_score_80():
    for requested, donors in COMPATIBILITY.items():
        for donor in donors - {requested}:
            assert compatibility_score(donor, requested) == 80


def test_standard_abo_rules():
    assert compatible_donor_types('O-') == {'O-'}
    assert compatible_donor_types('AB+') == {'O-', 'O+', 'A-', 'A+', 'B-', 'B+', 'AB-', 'AB+'}
    assert 'A+' not in compatible_donor_types('B+')
    assert 'O+' not in compatible_donor_types('A-')


def test_rare_groups_only_receive_their_own():
    assert compatible_donor_types(BOMBAY) == {BOMBAY}
    assert compatible_donor_types('INRA') == {'INRA'}
    assert BOMBAY not in compatible_donor_types('AB+')


def test_unknown_type_falls_back_to_self_only():
    assert compatible_donor_types('XY+') == {'XY+'}
    assert not is_compatible('O-', 'XY+')
    assert is_compatible('XY+', 'XY+')


def test_missing_type_has_no_compatible_donors():
    assert compatible_donor_types(None) == frozenset()
    assert compatible_donor_types('   ') == frozenset()


@pytest.mark.parametrize('raw, expected', [
    ('o+', 'O+'),
    (' AB - ', 'AB-'),
    ('O pos', 'O+'),
    ('b neg', 'B-'),
    ('A+ve', 'A+'),
    ('AB-VE', 'AB-'),
    ('A1B positive', 'A1B+'),
    ('Bombay Blood Group', BOMBAY),
    ('hh', BOMBAY),
    ('inra', 'INRA'),
])
def test_canonical_blood_type(raw, expected):
    assert canonical_blood_type(raw) == expected


def test_canonical_spellings_are_compatible():
    assert is_compatible('o neg', 'ab pos')
    assert compatibility_score('o pos', 'O+') == 100
