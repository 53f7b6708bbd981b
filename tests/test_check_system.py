"""
System Check Tests
"""

import subprocess
from unittest.mock import Mock, patch

from scripts import check_system


def test_private_key_present(config):
    assert check_system.check_private_key(config) is True


def test_private_key_missing(config, tmp_path):
    config['private_key_path'] = str(tmp_path / "absent.txt")

    assert check_system.check_private_key(config) is False


def test_private_key_invalid(config, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("abc123\n")
    config['private_key_path'] = str(path)

    assert check_system.check_private_key(config) is False


def test_contract_source(config, tmp_path):
    config['contract']['path'] = str(tmp_path / "missing.sol")
    assert check_system.check_contract_source(config) is False

    source = tmp_path / "sample.sol"
    source.write_text("pragma solidity ^0.8.0;")
    config['contract']['path'] = str(source)
    assert check_system.check_contract_source(config) is True


def test_compiler_present(config):
    result = Mock(stdout="solc, the solidity compiler commandline interface\nVersion: 0.8.26\n")

    with patch('scripts.check_system.subprocess.run', return_value=result) as run:
        assert check_system.check_compiler(config) is True

    assert run.call_args.args[0] == ['solc', '--version']


def test_compiler_missing(config):
    with patch('scripts.check_system.subprocess.run', side_effect=FileNotFoundError()):
        assert check_system.check_compiler(config) is False


def test_compiler_broken(config):
    error = subprocess.CalledProcessError(1, ['solc', '--version'])

    with patch('scripts.check_system.subprocess.run', side_effect=error):
        assert check_system.check_compiler(config) is False


def test_rpc_connection(config, mock_w3):
    with patch('utils.rpc_manager.Web3') as web3_cls:
        web3_cls.return_value = mock_w3

        mock_w3.is_connected.return_value = True
        assert check_system.check_rpc_connection(config) is True

        mock_w3.is_connected.return_value = False
        assert check_system.check_rpc_connection(config) is False


def test_wallet_balance(config, mock_w3):
    with patch('utils.rpc_manager.Web3') as web3_cls:
        web3_cls.return_value = mock_w3
        mock_w3.is_connected.return_value = True

        assert check_system.check_wallet_balance(config) is True

        mock_w3.eth.get_balance.return_value = 0
        assert check_system.check_wallet_balance(config) is False


def test_main_reports_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with patch('scripts.check_system.subprocess.run', side_effect=FileNotFoundError()), \
            patch('utils.rpc_manager.Web3') as web3_cls:
        web3_cls.return_value.is_connected.return_value = False
        assert check_system.main() == 1


def test_wallet_balance_without_key(config, tmp_path):
    config['private_key_path'] = str(tmp_path / "absent.txt")

    with patch('utils.rpc_manager.Web3') as web3_cls:
        assert check_system.check_wallet_balance(config) is False

    web3_cls.assert_not_called()


def test_main_all_checks_pass(tmp_path, monkeypatch, log_messages):
    """Exit 0 only when every check passes"""
    monkeypatch.chdir(tmp_path)

    with patch('scripts.check_system.check_private_key', return_value=True), \
            patch('scripts.check_system.check_contract_source', return_value=True), \
            patch('scripts.check_system.check_compiler', return_value=True), \
            patch('scripts.check_system.check_rpc_connection', return_value=True), \
            patch('scripts.check_system.check_wallet_balance', return_value=True):
        assert check_system.main() == 0

    assert "Total: 6/6 checks passed" in log_messages


def test_main_single_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with patch('scripts.check_system.check_private_key', return_value=True), \
            patch('scripts.check_system.check_contract_source', return_value=True), \
            patch('scripts.check_system.check_compiler', return_value=True), \
            patch('scripts.check_system.check_rpc_connection', return_value=True), \
            patch('scripts.check_system.check_wallet_balance', return_value=False):
        assert check_system.main() == 1
