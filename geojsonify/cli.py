"""CLI entrypoint for converting place documents to GeoJSON."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from geojsonify.common.config_loader import load_config
from geojsonify.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS
from geojsonify.common.errors import InputError, PipelineError
from geojsonify.common.fs import read_json
from geojsonify.common.logging import build_logger, log_event
from geojsonify.common.time_utils import generate_run_id
from geojsonify.pipeline.collection import assemble_with_stats
from geojsonify.pipeline.export import dumps_feature_collection, write_feature_collection


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("documents", help="JSON list of documents or a search response with hits")
    parser.add_argument("--config", default=None)
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--output", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--strict", action="store_true")
    return parser.parse_args(argv)


def _documents_from_hits(hits: list) -> list[dict]:
    documents = []
    for hit in hits:
        if not isinstance(hit, dict):
            raise InputError("search hits must be objects")
        source = dict(hit.get("_source") or {})
        if "_id" not in source and "_id" in hit:
            source["_id"] = hit["_id"]
        documents.append(source)
    return documents


def load_documents(path: Path) -> list[dict]:
    payload = read_json(path)

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("hits"), dict):
        return _documents_from_hits(payload["hits"].get("hits", []))
    raise InputError(f"Unsupported documents payload in {path}")


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    log_path = Path(args.log_file) if args.log_file else None
    logger = build_logger(run_id, level=args.log_level, log_path=log_path)

    config_path = Path(args.config) if args.config else None
    overlay_path = Path(args.overlay_config) if args.overlay_config else None

    try:
        config = load_config(config_path, overlay_path=overlay_path)
        documents = load_documents(Path(args.documents))
    except PipelineError as exc:
        log_event(
            logger,
            f"run failed: {exc}",
            run_id=run_id,
            stage="load",
            event="RUN_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL

    log_event(logger, "run start", run_id=run_id, stage="assemble", event="RUN_START", status="ok", documents_in=len(documents))
    collection, stats = assemble_with_stats(config, documents, logger)

    if args.output:
        write_feature_collection(Path(args.output), collection)
    else:
        sys.stdout.write(dumps_feature_collection(collection))
        sys.stdout.write("\n")

    partial = stats["features_out"] < stats["documents_in"] or (stats["features_out"] > 0 and not stats["bbox_computed"])
    log_event(
        logger,
        "run end",
        run_id=run_id,
        stage="assemble",
        event="RUN_END",
        status="partial" if partial else "ok",
        documents_in=stats["documents_in"],
        features_out=stats["features_out"],
    )
    if partial:
        return EXIT_HARD_FAIL if args.strict else EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
