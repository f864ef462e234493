from domca.modules.user_management.domain.models import User


def make_user(**overrides) -> User:
    fields = dict(
        first_name="Ada",
        last_name="Lovelace",
        user_name="ada",
        email="Ada@Example.com",
        password_hash="hash",
        password_salt="salt",
    )
    fields.update(overrides)
    return User.create(**fields)
