from dataclasses import dataclass

SIGNING_CATEGORY = "signing"
RECOVERY_CATEGORY = "recovery"
PROCESSING_FAILED_CATEGORY = "processing_failed"


@dataclass(frozen=True)
class LogMessage:
    code: str
    category: str
    text: str

    def __str__(self) -> str:
        return f"{self.code}: {self.text}"


SIGNED_TRANSACTION = LogMessage(
    "S-000000",
    SIGNING_CATEGORY,
    "Signed legacy transaction %s."
)
SIGNING_REJECTED = LogMessage(
    "S-000001",
    PROCESSING_FAILED_CATEGORY,
    "Signing backend rejected the private key: %s"
)
RECOVERED_PUBLIC_KEY = LogMessage(
    "S-000002",
    RECOVERY_CATEGORY,
    "Recovered signer 0x%s of transaction %s."
)
RECOVERY_REJECTED = LogMessage(
    "S-000003",
    PROCESSING_FAILED_CATEGORY,
    "Could not recover public key for transaction %s: %s"
)
GAS_ALIAS_CONFLICT = LogMessage(
    "S-000004",
    PROCESSING_FAILED_CATEGORY,
    "Transaction supplies both gas (%s) and gasLimit (%s) with different values."
)
