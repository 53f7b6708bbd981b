"""
System Check Script
Verifies key, compiler, and network before running a deployment

Usage:
    python -m scripts.check_system
"""

import os
import sys
import subprocess
from typing import Dict
from loguru import logger

from deployer.wallet_manager import WalletManager
from utils.config_loader import load_config
from utils.exceptions import ConfigurationError, DeploymentError
from utils.rpc_manager import RPCManager


def check_configuration(config_path: str = "config/deploy_config.json") -> bool:
    """Check the deployment config loads"""
    logger.info("Checking configuration...")

    try:
        load_config(config_path)
    except ConfigurationError as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success("  ✓ Configuration valid")
    return True


def check_private_key(config: Dict) -> bool:
    """Check the key file exists and derives an account"""
    logger.info("Checking private key...")

    try:
        address = WalletManager(config['private_key_path']).load().address
    except DeploymentError as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success(f"  ✓ Deployer: {address}")
    return True


def check_contract_source(config: Dict) -> bool:
    """Check the Solidity source exists"""
    logger.info("Checking contract source...")

    source_path = config['contract']['path']
    if not os.path.exists(source_path):
        logger.error(f"  ✗ {source_path} not found")
        return False

    logger.success(f"  ✓ {source_path}")
    return True


def check_compiler(config: Dict) -> bool:
    """Check solc is installed"""
    logger.info("Checking compiler...")

    solc_binary = config['compiler']['binary']
    try:
        result = subprocess.run(
            [solc_binary, '--version'],
            capture_output=True,
            text=True,
            check=True
        )
    except FileNotFoundError:
        logger.error(f"  ✗ '{solc_binary}' not found on PATH")
        return False
    except subprocess.CalledProcessError as e:
        logger.error(f"  ✗ '{solc_binary} --version' exited with {e.returncode}")
        return False

    version_line = result.stdout.strip().splitlines()[-1] if result.stdout.strip() else 'unknown'
    logger.success(f"  ✓ {version_line}")
    return True


def check_rpc_connection(config: Dict) -> bool:
    """Check the RPC endpoint answers"""
    logger.info("Checking RPC connection...")

    rpc_url = config['rpc_url']
    try:
        RPCManager(rpc_url).connect()
    except Exception as e:
        logger.error(f"  ✗ {rpc_url}: {e}")
        return False

    logger.success(f"  ✓ {rpc_url}: Connected")
    return True


def check_wallet_balance(config: Dict) -> bool:
    """Check the deployer has funds for gas"""
    logger.info("Checking wallet balance...")

    if not os.path.exists(config['private_key_path']):
        logger.warning("  No key file - skipping balance check")
        return False

    try:
        address = WalletManager(config['private_key_path']).load().address
        rpc_manager = RPCManager(config['rpc_url'])
        rpc_manager.connect()
        balance = rpc_manager.get_balance(address)
    except Exception as e:
        logger.error(f"  Error checking balance: {e}")
        return False

    logger.info(f"  Deployer: {balance:.6f} ETH")

    if balance <= 0:
        logger.warning("  ⚠ Deployer balance is zero")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def main(config_path: str = "config/deploy_config.json") -> int:
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("SampleToken Deployer System Check")
    logger.info("=" * 70)

    if not check_configuration(config_path):
        return 1

    config = load_config(config_path)

    checks = [
        ("Private Key", check_private_key),
        ("Contract Source", check_contract_source),
        ("Compiler", check_compiler),
        ("RPC Connection", check_rpc_connection),
        ("Wallet Balance", check_wallet_balance)
    ]

    results = [("Configuration", True)]

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func(config)
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy!")
        logger.info("Deploy: python main.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
