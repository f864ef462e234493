import warnings

from fastapi import HTTPException

from domca.shared.core.exceptions import (
    DatabaseError,
    DomcaException,
    InvalidArgumentError,
    InvalidOperationError,
    OwnershipMismatchError,
    RepositoryError,
    ValidationError,
    exception_to_dict,
)


class TestExceptionHierarchy:
    def test_status_codes(self):
        assert InvalidArgumentError().status_code == 400
        assert ValidationError().status_code == 422
        assert OwnershipMismatchError().status_code == 409
        assert InvalidOperationError().status_code == 409
        assert DatabaseError().status_code == 503
        assert RepositoryError().status_code == 500

    def test_all_share_base(self):
        for exc_type in (
            InvalidArgumentError,
            ValidationError,
            OwnershipMismatchError,
            InvalidOperationError,
            DatabaseError,
            RepositoryError,
        ):
            assert issubclass(exc_type, DomcaException)

    def test_details_and_code(self):
        error = InvalidArgumentError("bad", argument="amount_ml", value=0)
        payload = error.to_dict()["error"]
        assert payload["code"] == "INVALID_ARGUMENT"
        assert payload["details"] == {"argument": "amount_ml", "value": "0"}

    def test_to_http_exception(self):
        http_error = ValidationError("Token cannot be empty.", field="token").to_http_exception()
        assert isinstance(http_error, HTTPException)
        assert http_error.status_code == 422
        assert http_error.detail["details"]["field"] == "token"

    def test_validation_error_emits_no_deprecation_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert ValidationError("bad").status_code == 422

    def test_plain_exception_to_dict(self):
        payload = exception_to_dict(KeyError("x"))["error"]
        assert payload["code"] == "KEYERROR"
        assert payload["status_code"] == 500
