"""CLI adapter that verifies a saved solvency commitment."""

import json

from privaudit.application.use_cases.verify_solvency_proof import (
    VerifySolvencyProofUseCase,
)
from privaudit.infrastructure.artifact_store import PROOF_ARTIFACT_NAME
from privaudit.infrastructure.container import build_artifact_store
from privaudit.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Verify ``solvency-proof.json`` and exit non-zero when invalid."""
    logger = get_app_logger()
    store = build_artifact_store()
    try:
        payload = store.load(PROOF_ARTIFACT_NAME)
    except FileNotFoundError:
        logger.error(
            f"No proof artifact at {store.path_for(PROOF_ARTIFACT_NAME)}. "
            "Run the prove command first."
        )
        raise SystemExit(1)
    except json.JSONDecodeError as exc:
        logger.error(f"Proof artifact is not valid JSON: {exc}")
        raise SystemExit(1)

    result = VerifySolvencyProofUseCase(logger=logger).execute(payload)

    if not result.is_valid:
        print(f"Proof verification failed: {result.error}")
        raise SystemExit(1)
    print(
        f"Proof verified in {result.verification_time}ms "
        f"({len(result.public_signals)} public signals)"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
