from pathlib import Path

from ticketsim.config import load_config
from ticketsim.domain.models import DraftTicket
from ticketsim.server.wire import build_services


def test_generate_samples_runs():
    script = Path(__file__).resolve().parents[1] / "samples" / "generate_samples.py"
    assert script.exists(), "generate_samples.py should exist"

    namespace = {"__name__": "__main__", "__file__": str(script)}
    try:
        exec(script.read_text(encoding="utf-8"), namespace)
    except SystemExit:
        pass

    input_dir = script.parent / "input"
    assert (input_dir / "tickets.jsonl").exists()
    config_path = input_dir / "ticketsim.yml"
    assert config_path.exists()

    services = build_services(config_path, load_config(str(config_path)))
    results = services.find_similar(
        DraftTicket(
            subject="VPN Connection Issues",
            description="Users report cannot connect to corporate VPN",
        )
    )
    ids = [result.id for result in results]
    assert 1 in ids
    # resolved and 120-day-old tickets never surface
    assert 5 not in ids
    assert 7 not in ids
