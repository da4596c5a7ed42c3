"""CLI interface for adaptive_fec."""

import json
import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path

import typer
import yaml

from .application.policy_engine import PolicyEngine
from .controller import list_schemes
from .domain.models import PolicyDecision
from .infrastructure.logging_policy_sink import LoggingPolicySink
from .infrastructure.trace_files import load_stats_trace
from .protection_table import lookup_overhead
from .utils.config import FECConfig, load_fec_config

app = typer.Typer(help="Adaptive FEC policy command line interface")


class LogLevel(str, Enum):
    """Logging levels accepted by the CLI."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _resolve_config(config_path: Path | None, scheme: str | None) -> FECConfig:
    try:
        config = load_fec_config(config_path) if config_path is not None else FECConfig()
        if scheme is not None:
            config = FECConfig.model_validate({**config.model_dump(), "scheme": scheme})
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    return config


def _decision_record(decision: PolicyDecision) -> dict:
    record = asdict(decision)
    record["fec"]["scheme"] = decision.fec.scheme.value
    record["fec"]["at"] = decision.fec.at.isoformat()
    if decision.nack is not None:
        record["nack"]["at"] = decision.nack.at.isoformat()
    return record


def _run_replay(
    trace_path: Path,
    config_path: Path | None,
    scheme: str | None,
    report_json: Path | None,
) -> tuple[int, list[PolicyDecision]]:
    config = _resolve_config(config_path, scheme)
    try:
        samples = load_stats_trace(trace_path)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--trace") from exc

    engine = PolicyEngine(config, source=None, sink=LoggingPolicySink())
    decisions = engine.replay(samples)

    if report_json is not None:
        report_json.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "config": config.model_dump(),
            "samples": len(samples),
            "decisions": [_decision_record(decision) for decision in decisions],
        }
        report_json.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return len(samples), decisions


@app.command("replay")
def replay_command(
    trace: Path = typer.Option(..., "--trace", "-t", help="Path to a CSV, JSON or JSONL stats trace."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Optional JSON/YAML engine configuration."
    ),
    scheme: str | None = typer.Option(
        None, "--scheme", help="Override the configured FEC scheme."
    ),
    report_json: Path | None = typer.Option(
        None,
        "--report-json",
        help="Optional path to write the published decisions as JSON.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        case_sensitive=False,
        help="Logging level: debug, info, warning or error.",
    ),
) -> None:
    """Replay a recorded stats trace and print every published decision."""

    _configure_logging(log_level)
    sample_count, decisions = _run_replay(
        trace_path=trace,
        config_path=config,
        scheme=scheme,
        report_json=report_json,
    )

    for decision in decisions:
        fec = decision.fec
        typer.echo(
            f"[{fec.at.isoformat()}] "
            f"enabled={str(fec.enabled).lower()} scheme={fec.scheme.value} "
            f"overhead={fec.target_overhead:.3f} reason={fec.reason or '-'}"
        )
    typer.echo(f"Summary: samples={sample_count} published={len(decisions)}")


@app.command("lookup")
def lookup_command(
    rtt_ms: int = typer.Option(..., "--rtt-ms", min=0, help="Round-trip time in milliseconds."),
    loss_rate: float = typer.Option(
        ..., "--loss-rate", min=0.0, max=1.0, help="Packet loss as a fraction."
    ),
) -> None:
    """Print the protection-table overhead for an RTT and loss rate."""

    typer.echo(f"{lookup_overhead(rtt_ms, loss_rate):.4f}")


@app.command("schemes")
def schemes_command() -> None:
    """List FEC schemes with a policy controller."""

    for scheme in list_schemes():
        typer.echo(scheme)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
