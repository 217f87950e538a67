"""
Artifact Store Tests
"""

import pytest

from blockchain.artifact_store import ArtifactStore
from blockchain.errors import ArtifactNotFoundError

from conftest import AUCTION_ABI, write_artifact

# Placeholder solc leaves where an external library address will be linked
LIBRARY_PLACEHOLDER = '__$' + '12' * 17 + '$__'


class TestArtifactStore:
    """Resolve Hardhat artifacts by name"""

    def test_load_by_name(self, artifacts_dir):
        """Test bare name resolves ABI, bytecode and source"""
        artifact = ArtifactStore(str(artifacts_dir)).load('Auction')

        assert artifact.name == 'Auction'
        assert artifact.source_name == 'contracts/Auction.sol'
        assert artifact.abi == AUCTION_ABI
        assert artifact.bytecode.startswith('0x6080')

    def test_load_fully_qualified_name(self, artifacts_dir):
        """Test source-qualified name resolves"""
        artifact = ArtifactStore(str(artifacts_dir)).load('contracts/Auction.sol:Auction')

        assert artifact.name == 'Auction'

    def test_unknown_contract(self, artifacts_dir):
        """Test unknown name raises with the name in the message"""
        with pytest.raises(ArtifactNotFoundError, match='Token'):
            ArtifactStore(str(artifacts_dir)).load('Token')

    def test_blank_name(self, artifacts_dir):
        """Test whitespace-only name is rejected"""
        with pytest.raises(ArtifactNotFoundError):
            ArtifactStore(str(artifacts_dir)).load('   ')

    def test_missing_directory(self, tmp_path):
        """Test missing artifacts directory suggests compiling"""
        with pytest.raises(ArtifactNotFoundError, match='hardhat compile'):
            ArtifactStore(str(tmp_path / 'nothing')).load('Auction')

    def test_ambiguous_name(self, artifacts_dir):
        """Test duplicate bare names need the qualified form"""
        write_artifact(artifacts_dir, 'contracts/legacy/Auction.sol', 'Auction')

        with pytest.raises(ArtifactNotFoundError, match='fully qualified'):
            ArtifactStore(str(artifacts_dir)).load('Auction')

        # Qualified lookup still works
        artifact = ArtifactStore(str(artifacts_dir)).load('contracts/legacy/Auction.sol:Auction')
        assert artifact.source_name == 'contracts/legacy/Auction.sol'

    def test_interface_not_deployable(self, artifacts_dir):
        """Test empty bytecode is rejected"""
        write_artifact(artifacts_dir, 'contracts/IAuction.sol', 'IAuction', bytecode='0x')

        with pytest.raises(ArtifactNotFoundError, match='no bytecode'):
            ArtifactStore(str(artifacts_dir)).load('IAuction')

    def test_unlinked_library_not_deployable(self, artifacts_dir):
        """Test bytecode with library placeholders is rejected"""
        write_artifact(
            artifacts_dir, 'contracts/UsesLib.sol', 'UsesLib',
            bytecode='0x6080' + LIBRARY_PLACEHOLDER + '6080'
        )

        with pytest.raises(ArtifactNotFoundError, match='unlinked library references'):
            ArtifactStore(str(artifacts_dir)).load('UsesLib')

    def test_non_hex_bytecode_not_deployable(self, artifacts_dir):
        """Test bytecode that is not a hex string is rejected"""
        write_artifact(artifacts_dir, 'contracts/Odd.sol', 'Odd', bytecode={'object': '6080'})

        with pytest.raises(ArtifactNotFoundError):
            ArtifactStore(str(artifacts_dir)).load('Odd')

    def test_corrupt_artifact(self, artifacts_dir):
        """Test unparseable JSON is an artifact error"""
        (artifacts_dir / 'contracts/Auction.sol/Auction.json').write_text('{not json')

        with pytest.raises(ArtifactNotFoundError, match='Unreadable'):
            ArtifactStore(str(artifacts_dir)).load('Auction')

    def test_list_contracts_skips_debug_and_build_info(self, artifacts_dir):
        """Test listing ignores .dbg.json and build-info files"""
        write_artifact(artifacts_dir, 'contracts/Token.sol', 'Token')
        build_info = artifacts_dir / 'build-info'
        build_info.mkdir()
        (build_info / 'abc123.json').write_text('{}')

        assert ArtifactStore(str(artifacts_dir)).list_contracts() == ['Auction', 'Token']
