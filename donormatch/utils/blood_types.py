import re

BOMBAY = 'Bombay Blood Group'

# Recipient type -> donor types it can receive from
COMPATIBILITY = {
    'O-': frozenset(['O-']),
    'O+': frozenset(['O-', 'O+']),
    'A-': frozenset(['O-', 'A-']),
    'A+': frozenset(['O-', 'O+', 'A-', 'A+']),
    'B-': frozenset(['O-', 'B-']),
    'B+': frozenset(['O-', 'O+', 'B-', 'B+']),
    'AB-': frozenset(['O-', 'A-', 'B-', 'AB-']),
    'AB+': frozenset(['O-', 'O+', 'A-', 'A+', 'B-', 'B+', 'AB-', 'AB+']),
    # A subgroups
    'A1-': frozenset(['O-', 'A-', 'A1-']),
    'A1+': frozenset(['O-', 'O+', 'A-', 'A+', 'A1-', 'A1+']),
    'A2-': frozenset(['O-', 'A2-']),
    'A2+': frozenset(['O-', 'O+', 'A2-', 'A2+']),
    'A1B-': frozenset(['O-', 'A-', 'A1-', 'B-', 'AB-', 'A1B-']),
    'A1B+': frozenset(['O-', 'O+', 'A-', 'A+', 'A1-', 'A1+', 'B-', 'B+', 'AB-', 'AB+', 'A1B-', 'A1B+']),
    'A2B-': frozenset(['O-', 'A2-', 'B-', 'A2B-']),
    'A2B+': frozenset(['O-', 'O+', 'A2-', 'A2+', 'B-', 'B+', 'A2B-', 'A2B+']),
    # Rare phenotypes only receive from their own group
    BOMBAY: frozenset([BOMBAY]),
    'INRA': frozenset(['INRA']),
}

EXACT_MATCH_SCORE = 100
COMPATIBLE_MATCH_SCORE = 80

_ALIASES = {
    'BOMBAY': BOMBAY,
    'BOMBAYBLOODGROUP': BOMBAY,
    'HH': BOMBAY,
    'OH': BOMBAY,
}


def canonical_blood_type(blood_type):
    """Normalise spellings such as 'o pos', 'B+ve' or 'ab neg' to 'O+', 'B+', 'AB-'"""
    if not blood_type:
        return None
    s = re.sub(r'\s+', '', str(blood_type).upper())
    if not s:
        return None
    if s in _ALIASES:
        return _ALIASES[s]
    if s.startswith('BOMBAY'):
        return BOMBAY
    s = s.replace('+VE', '+').replace('-VE', '-')
    s = re.sub(r'(POSITIVE|POS)$', '+', s)
    s = re.sub(r'(NEGATIVE|NEG)$', '-', s)
    return s


def compatible_donor_types(requested_type):
    """Return the donor blood types a recipient of requested_type can receive from.

    Unknown types fall back to an exact self-match so a lookup miss never widens
    the donor pool.
    """
    canonical = canonical_blood_type(requested_type)
    if canonical is None:
        return frozenset()
    return COMPATIBILITY.get(canonical, frozenset([canonical]))


def is_compatible(donor_type, requested_type):
    return canonical_blood_type(donor_type) in compatible_donor_types(requested_type)


def compatibility_score(donor_type, requested_type):
    """100 for an exact type match, 80 for any other compatible pairing"""
    if canonical_blood_type(donor_type) == canonical_blood_type(requested_type):
        return EXACT_MATCH_SCORE
    return COMPATIBLE_MATCH_SCORE
