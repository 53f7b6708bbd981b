"""
Contract Record
In-memory description of the contract being deployed
"""

from typing import Any, Dict, List, Optional

from utils.exceptions import ContractStateError


class ContractRecord:
    """
    Holds one contract through its lifecycle.

    Fields fill strictly left to right and are write-once:
    path, name -> abi, bytecode -> tx_hash -> address -> instance
    """

    FIELD_ORDER = ('path', 'name', 'abi', 'bytecode', 'tx_hash', 'address', 'instance')

    def __init__(self, path: str, name: str):
        self._values: Dict[str, Any] = {field: None for field in self.FIELD_ORDER}
        self._set('path', path)
        self._set('name', name)

    def _set(self, field: str, value: Any):
        if value is None:
            raise ContractStateError(f"Cannot set {field} to None")

        if self._values[field] is not None:
            raise ContractStateError(f"{field} is already set")

        index = self.FIELD_ORDER.index(field)
        for earlier in self.FIELD_ORDER[:index]:
            if self._values[earlier] is None:
                raise ContractStateError(f"Cannot set {field} before {earlier}")

        self._values[field] = value

    @property
    def path(self) -> str:
        return self._values['path']

    @property
    def name(self) -> str:
        return self._values['name']

    @property
    def abi(self) -> Optional[List[Dict]]:
        return self._values['abi']

    @abi.setter
    def abi(self, value: List[Dict]):
        self._set('abi', value)

    @property
    def bytecode(self) -> Optional[str]:
        return self._values['bytecode']

    @bytecode.setter
    def bytecode(self, value: str):
        self._set('bytecode', value)

    @property
    def tx_hash(self) -> Optional[str]:
        return self._values['tx_hash']

    @tx_hash.setter
    def tx_hash(self, value: str):
        self._set('tx_hash', value)

    @property
    def address(self) -> Optional[str]:
        return self._values['address']

    @address.setter
    def address(self, value: str):
        self._set('address', value)

    @property
    def instance(self):
        return self._values['instance']

    @instance.setter
    def instance(self, value):
        self._set('instance', value)

    @property
    def lookup_key(self) -> str:
        """Key of this contract in solc --combined-json output"""
        return f"{self.path}:{self.name}"

    def __repr__(self):
        return (
            f"ContractRecord(path={self.path!r}, name={self.name!r}, "
            f"address={self.address!r})"
        )
