import pytest
import structlog
import yaml
from click.testing import CliRunner

from offers.infrastructure.bootstrap import CONFIG_ENV_VAR
from offers.infrastructure.cli.main import cli


def _write_offer(tmp_path, name, items):
    path = tmp_path / name
    path.write_text(yaml.dump({"items": items}), encoding="utf-8")
    return str(path)


def _widget(**overrides):
    item = {"product_id": "1", "name": "Widget", "price": "104.00", "quantity": 1}
    item.update(overrides)
    return item


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    yield CliRunner()
    structlog.reset_defaults()


class TestOfferPrice:

    def test_prints_offer_total(self, runner, tmp_path):
        path = _write_offer(tmp_path, "offer.yaml", [
            _widget(price="100.00", quantity=2, discount="10.00"),
        ])
        result = runner.invoke(cli, ["offer", "price", path])

        assert result.exit_code == 0, result.output
        assert "Widget" in result.output
        assert "190.00 USD" in result.output

    def test_currency_mismatch_reported(self, runner, tmp_path):
        path = _write_offer(tmp_path, "offer.yaml", [
            _widget(product_id="1", currency="USD"),
            _widget(product_id="2", currency="EUR"),
        ])
        result = runner.invoke(cli, ["offer", "price", path])

        assert result.exit_code == 1
        assert "currencies don't match" in result.output

    def test_configured_default_currency(self, runner, tmp_path):
        config = tmp_path / "offers.yaml"
        config.write_text(yaml.dump({"pricing": {"default_currency": "PLN"}}), encoding="utf-8")
        path = _write_offer(tmp_path, "offer.yaml", [_widget(price="5")])

        result = runner.invoke(cli, ["--config", str(config), "offer", "price", path])

        assert result.exit_code == 0, result.output
        assert "5.00 PLN" in result.output

    def test_missing_config_file(self, runner, tmp_path):
        path = _write_offer(tmp_path, "offer.yaml", [_widget()])
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "offer", "price", path])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    @pytest.mark.parametrize("price", ["Infinity", "NaN"])
    def test_non_finite_price_reported(self, runner, tmp_path, price):
        path = _write_offer(tmp_path, "offer.yaml", [_widget(price=price, quantity=0)])
        result = runner.invoke(cli, ["offer", "price", path])

        assert result.exit_code == 1
        assert "Invalid money amount" in result.output


class TestOfferCompare:

    def test_within_default_tolerance(self, runner, tmp_path):
        seen = _write_offer(tmp_path, "seen.yaml", [_widget(discount="4.00")])
        current = _write_offer(tmp_path, "current.yaml", [_widget()])

        result = runner.invoke(cli, ["offer", "compare", seen, current])

        assert result.exit_code == 0, result.output
        assert "Offer confirmed: 104.00 USD" in result.output

    def test_beyond_tolerance(self, runner, tmp_path):
        seen = _write_offer(tmp_path, "seen.yaml", [_widget(discount="4.00")])
        current = _write_offer(tmp_path, "current.yaml", [_widget()])

        result = runner.invoke(cli, ["offer", "compare", seen, current, "--delta", "3"])

        assert result.exit_code == 1
        assert "Offer changed" in result.output

    def test_non_positive_delta(self, runner, tmp_path):
        seen = _write_offer(tmp_path, "seen.yaml", [_widget()])

        result = runner.invoke(cli, ["offer", "compare", seen, seen, "--delta", "0"])

        assert result.exit_code == 1
        assert "positive percentage" in result.output

    def test_non_finite_price_reported(self, runner, tmp_path):
        seen = _write_offer(tmp_path, "seen.yaml", [_widget(price="Infinity")])

        result = runner.invoke(cli, ["offer", "compare", seen, seen])

        assert result.exit_code == 1
        assert "Invalid money amount" in result.output
