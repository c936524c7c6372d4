"""Shared fixtures: a trimmed copy of the Minerva page markup."""
import pytest

from minerva_watch.models import CurrentStatus, SaleEntry, StatusRecord

SAMPLE_HTML = """
<html>
<body>
  <div class="p-3">
    <p>Minerva is heading to <strong class="text-lightgreen"> Whitespring Resort </strong></p>
    <div class="countdown" data-minervacountdown="2024-01-01T00:00:00Z">3 days</div>
  </div>
  <figure class="wp-block-table is-style-stripes">
    <table>
      <thead>
        <tr><th>Sale</th><th>Location</th><th>Start</th><th>End</th></tr>
      </thead>
      <tbody>
        <tr class="bg-dark">
          <td>12</td>
          <td>Whitespring Resort <span class="badge">Next</span></td>
          <td>Jan 1, 2024</td>
          <td>Jan 3, 2024</td>
        </tr>
        <tr>
          <td>13</td>
          <td>Foundation</td>
          <td>Jan 8, 2024</td>
          <td>Jan 10, 2024</td>
        </tr>
      </tbody>
    </table>
  </figure>
</body>
</html>
"""


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


@pytest.fixture
def sample_record():
    return StatusRecord(
        current_status=CurrentStatus(next_location="Whitespring Resort", arrival_time="2024-01-01T00:00:00Z"),
        sale_schedule=[
            SaleEntry("12", "Whitespring Resort", "Jan 1, 2024", "Jan 3, 2024", is_next=True),
            SaleEntry("13", "Foundation", "Jan 8, 2024", "Jan 10, 2024"),
        ],
    )


class SleepRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def sleeps():
    return SleepRecorder()


@pytest.fixture
def webhook_env(monkeypatch):
    monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.example/api/webhooks/1/abc")
    return "https://discord.example/api/webhooks/1/abc"
