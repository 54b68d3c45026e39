"""Wallet signers used by the login flow.

A signer is anything with an ``address`` and a ``sign_message`` method
returning a hex signature of the exact message text. The SDK never sees
private keys; the host application supplies the signer.
"""

from typing import TYPE_CHECKING, Protocol

from eth_account.messages import encode_defunct

if TYPE_CHECKING:
    from eth_account.signers.local import LocalAccount


class WalletSigner(Protocol):
    """Signing capability of a wallet."""

    @property
    def address(self) -> str: ...

    def sign_message(self, message: str) -> str: ...


class EthAccountSigner:
    """Wallet signer backed by an eth_account ``LocalAccount``.

    Signs EIP-191 personal messages, matching what browser wallets do for
    ``personal_sign``.

    Example:
        ```python
        from eth_account import Account
        from resonance_sdk.auth.signers import EthAccountSigner

        signer = EthAccountSigner(Account.from_key("0x..."))
        await sdk.auth.connect_wallet(signer, role="validator")
        ```
    """

    def __init__(self, account: "LocalAccount") -> None:
        self._account = account

    @property
    def address(self) -> str:
        """The signer's checksummed address."""
        return self._account.address

    def sign_message(self, message: str) -> str:
        """Sign ``message`` and return the 0x-prefixed 65-byte signature."""
        signed = self._account.sign_message(encode_defunct(text=message))
        return "0x" + bytes(signed.signature).hex()
