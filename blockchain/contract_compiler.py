"""
Contract Compiler
Runs solc and extracts ABI + bytecode from its combined JSON output
"""

import json
import subprocess
from typing import Dict, List
from loguru import logger

from utils.exceptions import CompilerNotFoundError, CompilationError, ContractNotFoundError
from .contract_record import ContractRecord


class ContractCompiler:
    """
    Thin wrapper around the solc binary.
    No caching: every call recompiles the source file.
    """

    def __init__(self, solc_binary: str = "solc", evm_version: str = "paris"):
        self.solc_binary = solc_binary
        self.evm_version = evm_version

    def build_command(self, source_path: str) -> List[str]:
        """Build the solc argv for a source file"""
        return [
            self.solc_binary,
            '--evm-version', self.evm_version,
            '--combined-json', 'abi,bin',
            source_path
        ]

    def run_solc(self, source_path: str) -> Dict:
        """
        Compile a source file

        Args:
            source_path: Solidity file to compile

        Returns:
            Parsed combined JSON document
        """
        command = self.build_command(source_path)
        logger.info(f"Compiling {source_path} (evm {self.evm_version})...")
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True
            )
        except FileNotFoundError as e:
            raise CompilerNotFoundError(
                f"'{self.solc_binary}' not found on PATH"
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or '').strip()
            raise CompilationError(
                f"solc exited with status {e.returncode}: {stderr}"
            ) from e

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise CompilationError(f"solc output is not valid JSON: {e}") from e

    def compile(self, record: ContractRecord) -> ContractRecord:
        """
        Compile the record's source and fill in abi and bytecode

        Args:
            record: Contract record with path and name set

        Returns:
            The same record
        """
        compiled = self.run_solc(record.path)
        contracts = compiled.get('contracts', {})

        if record.lookup_key not in contracts:
            available = ', '.join(sorted(contracts)) or 'none'
            raise ContractNotFoundError(
                f"{record.lookup_key} not in compiler output (available: {available})"
            )

        entry = contracts[record.lookup_key]

        abi = entry['abi']
        # solc < 0.8.10 emits the abi as an embedded JSON string
        if isinstance(abi, str):
            abi = json.loads(abi)

        bytecode = entry['bin']
        if not bytecode.startswith('0x'):
            bytecode = '0x' + bytecode

        record.abi = abi
        record.bytecode = bytecode

        logger.success(
            f"Compiled {record.name}: {len(abi)} ABI entries, "
            f"{(len(bytecode) - 2) // 2} bytes"
        )

        return record
