import pytest

from fast_batch.utils.serialisation import command_name_from_class, get_exception_error_type
from fast_batch.exceptions import MissingArgumentsException


@pytest.mark.parametrize(
    "class_name, expected",
    [
        ("ImportUsers", "import:users"),
        ("ImportUsersBatch", "import:users"),
        ("PurgeExpiredTokensCommand", "purge:expired-tokens"),
        ("Cleanup", "cleanup"),
    ],
)
def test_command_name_from_class(class_name, expected):
    assert command_name_from_class(class_name) == expected


def test_exception_error_type():
    assert get_exception_error_type(MissingArgumentsException(["a"])) == "missing_arguments"
