"""Dojo Client: stand-in for every on-chain contract interaction.

Invariants:
    - Every mutating call returns a transaction hash: 0x + 64 lowercase hex chars
    - Queries return typed payloads (multiplier float, FishFamilyTree)
    - No call performs network IO, and none raises for well-formed input
    - initialize() is idempotent; readiness lives on the instance, not in a module global

Design Decisions:
    - Stub mode is explicit: missing DOJO_ACCOUNT_ADDRESS / DOJO_PRIVATE_KEY is logged as a
      warning, not an error, so local development works without chain credentials
    - Contract failures, once real calls land here, must surface as OnChainError
"""

import logging
import secrets

from aqua_stark.config import Settings
from aqua_stark.core.domain_types import DecorationKind, TxHash
from aqua_stark.schemas.fish import FishFamilyMember, FishFamilyTree

logger = logging.getLogger(__name__)

MOCK_XP_MULTIPLIER = 1.25


def generate_mock_tx_hash() -> TxHash:
    """0x + 64 hex chars, shaped like a Starknet transaction hash."""
    return TxHash("0x" + secrets.token_hex(32))


class DojoClient:
    """On-chain gateway. Currently every call is a stub returning mock data."""

    def __init__(self, settings: Settings):
        self.account_address = settings.dojo_account_address
        self.private_key = settings.dojo_private_key
        self.rpc_url = settings.starknet_rpc
        self.chain_id = settings.starknet_chain_id
        self.is_initialized = False

    @property
    def is_stub_mode(self) -> bool:
        return not (self.account_address and self.private_key)

    def initialize(self) -> bool:
        """Validate configuration once; later calls are no-ops."""
        if self.is_initialized:
            logger.debug("Dojo client already initialized")
            return True

        if self.is_stub_mode:
            logger.warning(
                "Dojo client not configured: DOJO_ACCOUNT_ADDRESS or DOJO_PRIVATE_KEY missing",
            )
            logger.warning(
                "Running in stub mode: all contract calls will return mock data",
            )
        else:
            logger.info("Dojo client initialized (stub mode)")
        self.is_initialized = True
        return True

    def is_ready(self) -> bool:
        return self.is_initialized

    def _transaction(self, description: str) -> TxHash:
        tx_hash = generate_mock_tx_hash()
        logger.info(f"{description}, tx: {tx_hash}", extra={"tx_hash": tx_hash})
        return tx_hash

    # ─── Player ──────────────────────────────────────────────────

    async def register_player(self, address: str) -> TxHash:
        logger.debug(f"[STUB] register_player called with address: {address}")
        return self._transaction(f"Player registered (stub): {address}")

    async def gain_player_xp(self, address: str, amount: int) -> TxHash:
        logger.debug(f"[STUB] gain_player_xp called - address: {address}, amount: {amount}")
        return self._transaction(f"Player XP granted (stub): {address} +{amount}xp")

    # ─── Fish ────────────────────────────────────────────────────

    async def mint_fish(self, address: str) -> TxHash:
        logger.debug(f"[STUB] mint_fish called with address: {address}")
        return self._transaction(f"Fish minted (stub): owner={address}")

    async def feed_fish_batch(self, fish_ids: list[int]) -> TxHash:
        logger.debug(f"[STUB] feed_fish_batch called with fish_ids: {fish_ids}")
        return self._transaction(f"Fish fed (stub): {len(fish_ids)} fish")

    async def gain_fish_xp(self, fish_id: int, amount: int) -> TxHash:
        logger.debug(f"[STUB] gain_fish_xp called - fish_id: {fish_id}, amount: {amount}")
        return self._transaction(f"Fish XP granted (stub): fish={fish_id} +{amount}xp")

    async def breed_fish(self, fish1_id: int, fish2_id: int) -> TxHash:
        logger.debug(f"[STUB] breed_fish called - fish1: {fish1_id}, fish2: {fish2_id}")
        return self._transaction(f"Fish bred (stub): parents={fish1_id},{fish2_id}")

    async def get_fish_family_tree(self, fish_id: int) -> FishFamilyTree:
        logger.debug(f"[STUB] get_fish_family_tree called with fish_id: {fish_id}")
        # Two generations: the fish and two parentless parents
        ancestors = [
            FishFamilyMember(
                id=fish_id, parent1_id=fish_id + 100, parent2_id=fish_id + 101,
                generation=0,
            ),
            FishFamilyMember(
                id=fish_id + 100, parent1_id=None, parent2_id=None, generation=1,
            ),
            FishFamilyMember(
                id=fish_id + 101, parent1_id=None, parent2_id=None, generation=1,
            ),
        ]
        tree = FishFamilyTree(
            fish_id=fish_id, ancestors=ancestors, generation_count=2,
        )
        logger.info(
            f"Fish family tree retrieved (stub): fish={fish_id}, "
            f"generations={tree.generation_count}",
        )
        return tree

    # ─── Tank ────────────────────────────────────────────────────

    async def mint_tank(self, address: str) -> TxHash:
        logger.debug(f"[STUB] mint_tank called with address: {address}")
        return self._transaction(f"Tank minted (stub): owner={address}")

    async def get_xp_multiplier(self, tank_id: int) -> float:
        """1.0 = no bonus, 1.5 = 50% bonus."""
        logger.debug(f"[STUB] get_xp_multiplier called with tank_id: {tank_id}")
        logger.info(
            f"XP multiplier retrieved (stub): tank={tank_id}, "
            f"multiplier={MOCK_XP_MULTIPLIER}",
        )
        return MOCK_XP_MULTIPLIER

    # ─── Decoration ──────────────────────────────────────────────

    async def mint_decoration(self, address: str, kind: DecorationKind) -> TxHash:
        logger.debug(f"[STUB] mint_decoration called - address: {address}, kind: {kind.value}")
        return self._transaction(
            f"Decoration minted (stub): owner={address}, kind={kind.value}",
        )

    async def activate_decoration(self, decoration_id: int) -> TxHash:
        logger.debug(f"[STUB] activate_decoration called with id: {decoration_id}")
        return self._transaction(f"Decoration activated (stub): id={decoration_id}")

    async def deactivate_decoration(self, decoration_id: int) -> TxHash:
        logger.debug(f"[STUB] deactivate_decoration called with id: {decoration_id}")
        return self._transaction(f"Decoration deactivated (stub): id={decoration_id}")
