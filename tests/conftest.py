"""Pytest fixtures for besttimes tests.

Shared admin-log samples used by the parser, aggregator and launcher tests.
"""

import pytest

SAMPLE_LOG = [
    "[2018/03/10 20:14:02] Server started",
    "[2018/03/10 20:14:05] <time> [ieper_mlj (ieper_mlj)] 0:51.00",
    "[2018/03/10 20:15:10] Loading challenge 12.Gbx (VwweH5HaTp3yoQm2s3D7bmvaHYd)...",
    "[2018/03/10 20:15:41] <chat> [ieper_mlj (ieper_mlj)]",
    "[2018/03/10 20:16:03] <chat> [sop ([ERF] SOP :-))] gg all (nice one)",
    "[2018/03/10 20:16:30] <time> [sop ([ERF] SOP :-))] 0:44.60",
    "[2018/03/10 20:16:35] <time> [ieper_mlj (ieper_mlj)] 0:47.12",
    "[2018/03/10 20:17:12] <time> [sop ([ERF] SOP :-))] 0:45.01",
    "[2018/03/10 20:17:40] <time> [broken (oops)] 0:4x.12",
    "[2018/13/10 20:17:41] <time> [ieper_mlj (ieper_mlj)] 0:01.00",
    "garbage line without timestamp",
    "",
    "[2018/03/10 20:18:00] Loading challenge 13.Gbx (Qx9ZpLmN)...",
    "[2018/03/10 20:18:44] <time> [ieper_mlj (ieper_mlj)] 0:23.75",
    "[2018/03/10 20:19:02] <time> [sop ([ERF] SOP :-))] 0:23.75",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LOG)


@pytest.fixture
def sample_log_file(tmp_path):
    """Write the sample log to disk, as the game server would."""
    log_file = tmp_path / "GameLog.mlxadmin.txt"
    log_file.write_text("\n".join(SAMPLE_LOG) + "\n", encoding="utf-8")
    return log_file
