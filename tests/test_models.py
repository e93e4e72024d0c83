"""
Tests for the stock price query model
"""
import pytest
from pydantic import ValidationError

from stock_proxy.models import ErrorResponse, StockPriceQuery

VALID = {"symbol": "FPT", "from_": "1000", "to": "2000", "resolution": "D"}


def test_query_keeps_values_as_given():
    query = StockPriceQuery(**VALID)

    assert (query.symbol, query.from_, query.to, query.resolution) == ("FPT", "1000", "2000", "D")


@pytest.mark.parametrize("field", list(VALID))
@pytest.mark.parametrize("value", [None, ""])
def test_query_rejects_missing_or_empty(field, value):
    with pytest.raises(ValidationError):
        StockPriceQuery(**dict(VALID, **{field: value}))


def test_error_response_shape():
    assert ErrorResponse(error="boom").model_dump() == {"error": "boom"}
