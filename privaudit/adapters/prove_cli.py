"""CLI adapter that writes a solvency commitment for the demo treasury."""

from privaudit.application.use_cases.generate_solvency_proof import (
    GenerateSolvencyProofUseCase,
)
from privaudit.infrastructure.artifact_store import PROOF_ARTIFACT_NAME
from privaudit.infrastructure.container import (
    build_artifact_store,
    load_demo_snapshot,
)
from privaudit.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Generate the commitment and save it as ``solvency-proof.json``."""
    logger = get_app_logger()
    snapshot = load_demo_snapshot()
    use_case = GenerateSolvencyProofUseCase(logger=logger)

    artifact = use_case.execute(snapshot)
    path = build_artifact_store().save(PROOF_ARTIFACT_NAME, artifact.to_dict())

    metadata = artifact.metadata
    print(f"Solvency proof written to {path}")
    print(
        f"assets={metadata.total_assets}, "
        f"liabilities={metadata.total_liabilities}, "
        f"solvent={metadata.is_solvent}, "
        f"proving_time={metadata.proving_time}ms"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
