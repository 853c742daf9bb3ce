import pytest

from verdict import (
    FormData,
    checkbox,
    map4,
    nullable,
    num,
    optional,
    required,
    str_,
)

from tests.structstest import User


@pytest.fixture(scope="function")
def user_validator():
    return map4(
        User,
        required("name", str_),
        nullable("age", num),
        required("newsletter", checkbox()),
        optional("notifications", checkbox("notifs"), False),
    )


@pytest.fixture(scope="function")
def signup_form() -> FormData:
    return FormData(
        [
            ("name", "Brendan"),
            ("age", "28"),
            ("newsletter", "on"),
        ]
    )
