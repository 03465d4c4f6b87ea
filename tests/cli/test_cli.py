"""CLI: offline render and doctor smoke tests (typer CliRunner)."""

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_render_shop_offline_prints_page():
    result = runner.invoke(app, ["render", "Shop", "--offline", "--total", "960"])
    assert result.exit_code == 0, result.output
    assert "<!DOCTYPE html>" in result.output
    assert "9.60" in result.output


def test_render_checkout_success_offline_to_file(tmp_path):
    out = tmp_path / "success.html"
    result = runner.invoke(app, ["render", "CheckoutSuccess", "--offline", "--foreign-id", "4711", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert 'data-foreign-id="4711"' in out.read_text(encoding="utf-8")


def test_render_unknown_template_exits_with_error():
    result = runner.invoke(app, ["render", "Nope", "--offline"])
    assert result.exit_code == 1


def test_doctor_offline_reports_missing_credentials(tmp_path):
    env = tmp_path / ".env"
    env.write_text("ELEFUNDS_COUNTRYCODE=en\n", encoding="utf-8")
    result = runner.invoke(app, ["--env-file", str(env), "doctor", "run", "--offline"])
    assert result.exit_code == 0, result.output
    assert "Credentials" in result.output
