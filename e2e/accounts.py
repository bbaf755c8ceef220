# Test Account Configuration

"""
Test accounts used by the e2e suite, one per role.

Accounts normally come from test.properties. For CI and GodMode runs against a
dev server, placeholder names are generated instead so that hard-coded account
names in test files are detected. Dev server login does not need a password,
so generated accounts have none.
"""

import random
import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

ROLE_ADMIN = 'admin'
ROLE_INSTRUCTOR = 'instructor'
ROLE_STUDENT1 = 'student1'
ROLE_STUDENT2 = 'student2'
ROLE_UNREGISTERED = 'unregistered'

# role -> (key stem in test.properties, label used for generated accounts)
ACCOUNT_ROLES = {
    ROLE_ADMIN: ('admin', 'yourGoogleId'),
    ROLE_INSTRUCTOR: ('instructor', 'teammates.coord'),
    ROLE_STUDENT1: ('student1', 'alice.tmms'),
    ROLE_STUDENT2: ('student2', 'charlie.tmms'),
    ROLE_UNREGISTERED: ('unreg', 'teammates.unreg'),
}

SALT_LENGTH = 8
SALT_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class TestAccount:
    """An account identifier and its password (None when not required)."""

    # Not a test class, keep pytest from collecting it
    __test__ = False

    account: Optional[str]
    password: Optional[str] = field(default=None, repr=False)


def generate_salt(length=SALT_LENGTH) -> str:
    """Generate a random alphanumeric suffix for account names."""
    return ''.join(random.choices(SALT_ALPHABET, k=length))


def account_keys(role):
    """
    Get the test.properties keys holding a role's account and password.

    Args:
        role: One of the keys of ACCOUNT_ROLES

    Returns:
        tuple: (account key, password key)
    """
    if role not in ACCOUNT_ROLES:
        raise ValueError(f"Unknown test account role: {role}")
    stem = ACCOUNT_ROLES[role][0]
    return f'test.{stem}.account', f'test.{stem}.password'


def accounts_from_properties(properties):
    """Take every account and password verbatim from the properties; missing keys give None."""
    accounts = {}
    for role in ACCOUNT_ROLES:
        account_key, password_key = account_keys(role)
        accounts[role] = TestAccount(properties.get(account_key), properties.get(password_key))
    return MappingProxyType(accounts)


def generate_accounts(salt=None):
    """
    Generate placeholder accounts sharing one salt.

    Args:
        salt: Suffix to append; a fresh one is generated when omitted

    Returns:
        Mapping of role to TestAccount, all without passwords
    """
    if salt is None:
        salt = generate_salt()
    dot_salt = f'.{salt}'
    return MappingProxyType({
        role: TestAccount(label + dot_salt, None)
        for role, (_, label) in ACCOUNT_ROLES.items()
    })
