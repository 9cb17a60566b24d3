"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal

from src.adapters.interface.streamlit import app
from src.domain.errors import RegisterNotFoundError
from src.domain.models.cash_register import RegisterReport
from src.infrastructure.settings import CajaSettings


def _report(register_id: int, day: int, is_open: bool) -> RegisterReport:
    return RegisterReport(
        id=register_id,
        business_date=date(2024, 5, day),
        is_open=is_open,
        opening_balance=Decimal("100"),
        income=Decimal("50"),
        expense=Decimal("20"),
        cash_on_hand=Decimal("130"),
        handed_over=Decimal("0"),
        gross_revenue=Decimal("50"),
        net_profit=Decimal("30"),
    )


def test_fetch_current_report_returns_none_when_empty(monkeypatch):
    """The page shows the open form before the first register exists."""

    class _EmptyUseCase:
        def execute(self):
            raise RegisterNotFoundError()

    monkeypatch.setattr(
        app,
        "build_register_report_use_case",
        lambda: _EmptyUseCase(),
    )

    assert app._fetch_current_report() is None


def test_prepare_profit_chart_data_is_chronological():
    reports = [_report(2, 11, True), _report(1, 10, False)]

    data = app._prepare_profit_chart_data(reports, "$")

    assert [row["date"] for row in data] == ["2024-05-10", "2024-05-11"]
    assert data[0]["net_profit"] == 30.0
    assert data[0]["label"] == "30.00 $"


def test_history_rows_format_amounts():
    rows = app._history_rows([_report(1, 10, False)], "$")

    assert rows[0]["ID"] == 1
    assert rows[0]["Status"] == "Closed"
    assert rows[0]["Cash on hand"] == "130.00 $"


class _Column:
    def __init__(self, owner) -> None:
        self._owner = owner

    def metric(self, label, value, *args, **kwargs):
        self._owner.metrics[label] = value


class _FakeStreamlit:
    def __init__(self, page: str) -> None:
        self.page = page
        self.titles: list[str] = []
        self.warnings: list[str] = []
        self.metrics: dict[str, str] = {}
        self.dataframe_payload = None
        self.sidebar = self

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.titles.append(text)

    def selectbox(self, label, options):
        return self.page

    def subheader(self, text: str):
        self.titles.append(text)

    def caption(self, text: str):
        self.caption_text = text

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.warnings.append(text)

    def columns(self, count: int):
        return [_Column(self) for _ in range(count)]

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def altair_chart(self, chart, **kwargs):
        self.chart = chart


def _patch_common(monkeypatch, fake_st) -> None:
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app.CajaSettings,
        "from_env",
        classmethod(lambda cls: CajaSettings(currency_symbol="$")),
    )


def test_main_today_renders_current_register(monkeypatch):
    fake_st = _FakeStreamlit("Today")
    _patch_common(monkeypatch, fake_st)
    forms: list[str] = []
    monkeypatch.setattr(
        app,
        "_fetch_current_report",
        lambda: _report(1, 10, True),
    )
    monkeypatch.setattr(
        app,
        "_render_close_form",
        lambda report: forms.append(f"close:{report.id}"),
    )
    monkeypatch.setattr(
        app,
        "_render_open_form",
        lambda: forms.append("open"),
    )

    app.main()

    assert fake_st.metrics["Cash on hand"] == "130.00 $"
    assert forms == ["close:1"]


def test_main_today_without_register_offers_open(monkeypatch):
    fake_st = _FakeStreamlit("Today")
    _patch_common(monkeypatch, fake_st)
    forms: list[str] = []
    monkeypatch.setattr(app, "_fetch_current_report", lambda: None)
    monkeypatch.setattr(app, "_render_open_form", lambda: forms.append("open"))

    app.main()

    assert fake_st.warnings
    assert forms == ["open"]


def test_main_history_displays_table(monkeypatch):
    fake_st = _FakeStreamlit("History")
    _patch_common(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_load_reports",
        lambda: [_report(2, 11, True), _report(1, 10, False)],
    )
    monkeypatch.setattr(app, "_render_profit_chart", lambda reports, s: None)

    app.main()

    table_data, kwargs = fake_st.dataframe_payload
    assert [row["ID"] for row in table_data] == [2, 1]
    assert kwargs["hide_index"] is True


def test_main_history_warns_when_empty(monkeypatch):
    fake_st = _FakeStreamlit("History")
    _patch_common(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_load_reports", lambda: [])

    app.main()

    assert fake_st.warnings == ["No cash registers found."]


def test_render_profit_chart_draws_from_plain_rows(monkeypatch):
    """The chart is built from inline rows without extra checks."""
    fake_st = _FakeStreamlit("History")
    monkeypatch.setattr(app, "st", fake_st)

    reports = [_report(2, 11, True), _report(1, 10, False)]

    app._render_profit_chart(reports, "$")

    assert fake_st.warnings == []
    assert fake_st.titles == ["Daily net profit"]
    assert fake_st.chart is not None
