from types import SimpleNamespace

import pytest

from simple_stripe import SimpleStripe


@pytest.fixture
def stripe_client(mocker):
    # Stand-in for stripe.StripeClient; tests set the *_async calls they need
    client = mocker.Mock()
    v1 = client.v1
    v1.payment_intents.create_async = mocker.AsyncMock()
    v1.payment_intents.retrieve_async = mocker.AsyncMock()
    v1.payment_intents.update_async = mocker.AsyncMock()
    v1.payment_intents.confirm_async = mocker.AsyncMock()
    v1.setup_intents.create_async = mocker.AsyncMock()
    v1.setup_intents.retrieve_async = mocker.AsyncMock()
    v1.customers.create_async = mocker.AsyncMock()
    v1.customers.retrieve_async = mocker.AsyncMock()
    v1.payment_methods.list_async = mocker.AsyncMock()
    v1.payment_methods.detach_async = mocker.AsyncMock()
    return client


@pytest.fixture
def simple(stripe_client):
    return SimpleStripe("sk_test_123", client=stripe_client)


@pytest.fixture
def make_card():
    def _make_card(id, fingerprint, created, brand="visa", last4="4242", exp_month=12, exp_year=2030):
        return SimpleNamespace(
            id=id,
            created=created,
            card=SimpleNamespace(
                fingerprint=fingerprint,
                brand=brand,
                last4=last4,
                exp_month=exp_month,
                exp_year=exp_year,
            ),
        )

    return _make_card
