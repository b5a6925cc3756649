"""Decides which dependency scopes carry license obligations.

A scope is reported when it can be resolved, is not a test scope and ships
in the final binary.
"""
from oss_licenses.models import DependencyScope

TEST_PREFIX = "test"
ANDROID_TEST_PREFIX = "androidTest"
TEST_COMPILE = frozenset({"testCompile", "androidTestCompile"})
PACKAGED_DEPENDENCIES_PREFIXES = ("compile", "implementation", "api")


def can_be_resolved(scope: DependencyScope) -> bool:
    return scope.resolvable


def is_test(scope: DependencyScope) -> bool:
    """True if the scope is a test scope or inherits from testCompile/androidTestCompile."""
    if scope.name.startswith((TEST_PREFIX, ANDROID_TEST_PREFIX)):
        return True
    return any(ancestor in TEST_COMPILE for ancestor in scope.ancestors)


def is_packaged_dependency(scope: DependencyScope) -> bool:
    """True for scopes whose dependencies end up in the built artifact, as opposed to build or test time ones."""
    return scope.name.startswith(PACKAGED_DEPENDENCIES_PREFIXES)


def is_eligible(scope: DependencyScope) -> bool:
    return can_be_resolved(scope) and not is_test(scope) and is_packaged_dependency(scope)
