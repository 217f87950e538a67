"""
Artifact Store
Resolves compiled contract artifacts (Hardhat JSON layout) by name
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
from eth_utils import is_hex
from loguru import logger

from .errors import ArtifactNotFoundError


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract: ABI plus creation bytecode"""
    name: str
    source_name: str
    abi: List[Dict] = field(repr=False)
    bytecode: str = field(repr=False)
    path: Optional[Path] = None


class ArtifactStore:
    """
    Looks up artifacts under an artifacts directory

    Layout: <artifacts_dir>/<source path>/<Name>.sol/<Name>.json
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Store

        Args:
            artifacts_dir: Root of the compiler output
        """
        self.artifacts_dir = Path(artifacts_dir)

    def load(self, contract_name: str) -> ContractArtifact:
        """
        Resolve a contract artifact

        Args:
            contract_name: Bare name ("Auction") or fully qualified
                ("contracts/Auction.sol:Auction")

        Returns:
            ContractArtifact

        Raises:
            ArtifactNotFoundError: unknown, ambiguous, abstract or unlinked contract
        """
        if not contract_name or not contract_name.strip():
            raise ArtifactNotFoundError("Contract name must be a non-empty string")

        contract_name = contract_name.strip()
        path = self._find_artifact_path(contract_name)

        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ArtifactNotFoundError(f"Unreadable artifact {path}: {e}") from e

        abi = contract_json.get('abi')
        bytecode = contract_json.get('bytecode')

        if abi is None or bytecode is None:
            raise ArtifactNotFoundError(f"Artifact {path} is missing abi/bytecode")

        # Interfaces and abstract contracts compile to empty bytecode
        if bytecode in ('', '0x'):
            raise ArtifactNotFoundError(
                f"{contract_name} has no bytecode (interface or abstract contract)"
            )

        # Contracts using external libraries keep __$...$__ placeholders until linked
        if not isinstance(bytecode, str) or not is_hex(bytecode):
            raise ArtifactNotFoundError(
                f"{contract_name} bytecode has unlinked library references"
            )

        artifact = ContractArtifact(
            name=contract_json.get('contractName', path.stem),
            source_name=contract_json.get('sourceName', path.parent.name),
            abi=abi,
            bytecode=bytecode,
            path=path
        )

        logger.debug(f"Loaded artifact {artifact.source_name}:{artifact.name} from {path}")
        return artifact

    def list_contracts(self) -> List[str]:
        """Names of all artifacts found under the artifacts directory"""
        return sorted({path.stem for path in self._iter_artifact_files()})

    def _find_artifact_path(self, contract_name: str) -> Path:
        """Map a bare or fully qualified name to exactly one artifact file"""
        if not self.artifacts_dir.is_dir():
            raise ArtifactNotFoundError(
                f"Artifacts directory not found: {self.artifacts_dir} "
                f"(run 'npx hardhat compile' first)"
            )

        if ':' in contract_name:
            source_name, name = contract_name.rsplit(':', 1)
            candidates = [
                self.artifacts_dir / source_name / f"{name}.json",
                self.artifacts_dir / "contracts" / source_name / f"{name}.json",
            ]
            for candidate in candidates:
                if candidate.is_file():
                    return candidate
            raise ArtifactNotFoundError(f"Artifact for {contract_name} not found")

        matches = [
            path for path in self._iter_artifact_files()
            if path.stem == contract_name
        ]

        if not matches:
            raise ArtifactNotFoundError(
                f"Artifact for {contract_name} not found in {self.artifacts_dir}"
            )

        if len(matches) > 1:
            sources = ', '.join(sorted(str(p.parent.name) for p in matches))
            raise ArtifactNotFoundError(
                f"Multiple artifacts named {contract_name} ({sources}); "
                f"use the fully qualified name"
            )

        return matches[0]

    def _iter_artifact_files(self):
        """Yield artifact JSON files, skipping debug files and build info"""
        if not self.artifacts_dir.is_dir():
            return

        for path in self.artifacts_dir.rglob('*.json'):
            if path.name.endswith('.dbg.json'):
                continue
            if 'build-info' in path.parts:
                continue
            # Hardhat places <Name>.json inside a <Source>.sol directory
            if not path.parent.name.endswith('.sol'):
                continue
            yield path
