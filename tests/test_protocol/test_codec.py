"""
Tests for the RLP transaction codec.

Tests cover:
- Signing preimages with and without a chain id
- Final (signed) encoding
- Decoding signed transactions and contract deployments
- Rejection of malformed input
"""

import pytest
import rlp
from eth_account import Account

from ethtx.errors import MalformedEncodingError, MissingValueError
from ethtx.protocol.codec import decode_transaction, encode_transaction
from ethtx.types.address import CONTRACT_DEPLOYMENT, NormalAddress
from ethtx.types.transaction import Transaction

TO = NormalAddress(b"\x35" * 20)


# =============================================================================
# Encoding
# =============================================================================


class TestEncodeForSignature:
    """Tests for the signing preimage."""

    def test_eip155_preimage(self, eip155_unsigned: Transaction, eip155_signing_data: bytes) -> None:
        """Test the EIP-155 preimage matches the published signing data."""
        assert encode_transaction(eip155_unsigned, for_signature=True) == eip155_signing_data

    def test_explicit_chain_id_wins(self, eip155_unsigned: Transaction) -> None:
        """Test an explicit chain id overrides the stored one."""
        encoded = encode_transaction(eip155_unsigned, for_signature=True, chain_id=5)
        assert rlp.decode(encoded)[6:] == [b"\x05", b"", b""]

    def test_without_chain_id_has_six_fields(self, eip155_unsigned: Transaction) -> None:
        """Test the pre-EIP-155 preimage has six fields."""
        tx = eip155_unsigned.with_chain_id(None)
        assert len(rlp.decode(encode_transaction(tx, for_signature=True))) == 6

    def test_chain_id_zero_is_still_appended(self) -> None:
        """Test chain id 0 still appends the replay-protection triple."""
        tx = Transaction(nonce=0, to=TO, value=0)
        fields = rlp.decode(encode_transaction(tx, for_signature=True, chain_id=0))
        assert len(fields) == 9

    def test_signature_fields_excluded(self, eip155_signed: Transaction, eip155_signing_data: bytes) -> None:
        """Test v, r and s never enter the preimage."""
        assert eip155_signed.encode(for_signature=True) == eip155_signing_data


class TestEncodeFinal:
    """Tests for the signed encoding."""

    def test_nine_fields_in_order(self) -> None:
        """Test the signed form lists the nine fields in wire order."""
        tx = Transaction(nonce=1, to=TO, gas_price=2, gas_limit=3, value=4, data=b"\x05", v=27, r=6, s=7)
        assert rlp.decode(encode_transaction(tx)) == [
            b"\x01", b"\x02", b"\x03", b"\x35" * 20, b"\x04", b"\x05", b"\x1b", b"\x06", b"\x07",
        ]

    def test_chain_id_ignored(self, eip155_signed: Transaction) -> None:
        """Test the chain id argument has no effect on the signed form."""
        assert encode_transaction(eip155_signed, chain_id=99) == encode_transaction(eip155_signed)

    def test_unsigned_final_form_carries_v_r_s(self) -> None:
        """Test an unsigned transaction still encodes v, r and s."""
        tx = Transaction(nonce=0, to=TO, value=0, v=1)
        assert rlp.decode(encode_transaction(tx))[6:] == [b"\x01", b"", b""]

    def test_contract_deployment_is_empty(self) -> None:
        """Test a contract deployment encodes an empty destination."""
        tx = Transaction(nonce=0, to=CONTRACT_DEPLOYMENT, value=0, data=b"\x60\x80")
        assert rlp.decode(encode_transaction(tx))[3] == b""

    def test_fee_market_fields_not_encoded(self) -> None:
        """Test fee-market fields are not part of the legacy encoding."""
        base = Transaction(nonce=0, to=TO, value=0)
        with_fees = Transaction(nonce=0, to=TO, value=0, max_fee_per_gas=10, max_priority_fee_per_gas=2)
        assert encode_transaction(base) == encode_transaction(with_fees)

    @pytest.mark.parametrize("for_signature", [True, False])
    def test_missing_value(self, for_signature: bool) -> None:
        """Test encoding without a value raises MissingValueError."""
        with pytest.raises(MissingValueError) as exc_info:
            encode_transaction(Transaction(nonce=0, to=TO), for_signature=for_signature)
        assert exc_info.value.code == "MISSING_VALUE"

    def test_matches_eth_account(self, eip155_signed: Transaction, eip155_key: str) -> None:
        """Test encoding and hash agree with eth_account."""
        signed = Account.sign_transaction(
            {
                "nonce": 9,
                "gasPrice": 20_000_000_000,
                "gas": 21_000,
                "to": "0x" + "35" * 20,
                "value": 10**18,
                "data": b"",
                "chainId": 1,
            },
            eip155_key,
        )
        assert eip155_signed.encode() == bytes(signed.raw_transaction)
        assert eip155_signed.hash == bytes(signed.hash)


# =============================================================================
# Decoding
# =============================================================================


class TestDecode:
    """Tests for decode_transaction."""

    def test_round_trip(self, eip155_signed: Transaction) -> None:
        """Test decoding restores every signed field."""
        decoded = decode_transaction(eip155_signed.encode())
        for field in ("nonce", "gas_price", "gas_limit", "to", "value", "data", "v", "r", "s"):
            assert getattr(decoded, field) == getattr(eip155_signed, field)

    def test_round_trip_legacy(self, legacy_signed: Transaction) -> None:
        """Test a pre-EIP-155 transaction decodes to an equal value."""
        decoded = Transaction.decode(legacy_signed.encode())
        assert decoded == legacy_signed

    def test_decoded_chain_id_is_not_stored(self, eip155_signed: Transaction) -> None:
        """Test decoding infers the chain id without storing it."""
        decoded = decode_transaction(eip155_signed.encode())
        assert decoded.chain_id is None
        assert decoded.inferred_chain_id == 1

    def test_contract_deployment_round_trip(self, deployment_signed: Transaction) -> None:
        """Test an empty destination decodes as a contract deployment."""
        decoded = decode_transaction(deployment_signed.encode())
        assert decoded.to == CONTRACT_DEPLOYMENT
        assert decoded.to != NormalAddress(b"\x00" * 20)
        assert decoded.data == deployment_signed.data

    def test_zero_address_stays_normal(self) -> None:
        """Test the zero address is not mistaken for a deployment."""
        tx = Transaction(nonce=0, to=NormalAddress(b"\x00" * 20), value=0, v=27, r=1, s=1)
        decoded = decode_transaction(tx.encode())
        assert isinstance(decoded.to, NormalAddress)
        assert decoded.to.raw == b"\x00" * 20

    def test_accepts_hex_string(self, eip155_signed: Transaction) -> None:
        """Test hex input decodes the same as raw bytes."""
        raw_hex = "0x" + eip155_signed.encode().hex()
        assert decode_transaction(raw_hex) == decode_transaction(eip155_signed.encode())

    def test_empty_fields_are_zero(self) -> None:
        """Test empty scalar fields decode as zero."""
        raw = rlp.encode([b"", b"", b"", b"", b"", b"", b"", b"", b""])
        tx = decode_transaction(raw)
        assert (tx.nonce, tx.gas_price, tx.gas_limit, tx.value, tx.v, tx.r, tx.s) == (0, 0, 0, 0, 0, 0, 0)
        assert tx.to == CONTRACT_DEPLOYMENT
        assert not tx.is_signed

    def test_eth_account_transaction(self, eip155_key: str, eip155_sender: NormalAddress) -> None:
        """Test a transaction signed by eth_account decodes and recovers."""
        signed = Account.sign_transaction(
            {
                "nonce": 0,
                "gasPrice": 1,
                "gas": 100_000,
                "to": "0x" + "35" * 20,
                "value": 0,
                "data": b"\xde\xad\xbe\xef",
                "chainId": 11155111,
            },
            eip155_key,
        )
        tx = decode_transaction(bytes(signed.raw_transaction))
        assert tx.inferred_chain_id == 11155111
        assert tx.data == b"\xde\xad\xbe\xef"
        assert tx.sender == eip155_sender


class TestDecodeRejects:
    """Tests for malformed input."""

    def test_unsigned_preimage_rejected(self, eip155_unsigned: Transaction) -> None:
        """Test a six-field preimage is rejected with its field count."""
        raw = eip155_unsigned.with_chain_id(None).encode(for_signature=True)
        with pytest.raises(MalformedEncodingError) as exc_info:
            decode_transaction(raw)
        assert exc_info.value.field_count == 6
        assert exc_info.value.code == "MALFORMED_ENCODING"

    @pytest.mark.parametrize("count", [0, 8, 10])
    def test_wrong_arity_rejected(self, count: int) -> None:
        """Test lists with other than nine fields are rejected."""
        with pytest.raises(MalformedEncodingError):
            decode_transaction(rlp.encode([b"\x01"] * count))

    @pytest.mark.parametrize("length", [1, 19, 21])
    def test_bad_to_length_rejected(self, length: int) -> None:
        """Test a destination that is neither empty nor 20 bytes is rejected."""
        fields = [b"", b"", b"", b"\x01" * length, b"", b"", b"\x1b", b"\x01", b"\x01"]
        with pytest.raises(MalformedEncodingError):
            decode_transaction(rlp.encode(fields))

    def test_nested_list_rejected(self) -> None:
        """Test a nested list in a scalar position is rejected."""
        fields = [b"", b"", b"", [], b"", b"", b"\x1b", b"\x01", b"\x01"]
        with pytest.raises(MalformedEncodingError):
            decode_transaction(rlp.encode(fields))

    def test_non_list_rejected(self) -> None:
        """Test an RLP string is rejected."""
        with pytest.raises(MalformedEncodingError):
            decode_transaction(rlp.encode(b"not a list"))

    @pytest.mark.parametrize("raw", [b"", b"\xf8", b"\xc1\x01\x02", "0xzz"])
    def test_invalid_rlp_rejected(self, raw) -> None:
        """Test truncated, trailing or non-hex input is rejected."""
        with pytest.raises(MalformedEncodingError):
            decode_transaction(raw)

    def test_oversized_integer_rejected(self) -> None:
        """Test integers wider than 32 bytes are rejected."""
        fields = [b"\x01" * 33, b"", b"", b"", b"", b"", b"\x1b", b"\x01", b"\x01"]
        with pytest.raises(MalformedEncodingError):
            decode_transaction(rlp.encode(fields))

    @pytest.mark.parametrize("raw", [12345, None, 1.5])
    def test_non_text_input_rejected(self, raw) -> None:
        """Test input that is neither bytes nor a string is rejected."""
        with pytest.raises(MalformedEncodingError) as exc_info:
            decode_transaction(raw)
        assert "expected bytes or a hex string" in exc_info.value.message

    def test_whitespace_in_hex_rejected(self, eip155_signed: Transaction) -> None:
        """Test hex input with embedded whitespace is rejected."""
        raw_hex = eip155_signed.encode().hex()
        with pytest.raises(MalformedEncodingError):
            decode_transaction("0x " + raw_hex)
        with pytest.raises(MalformedEncodingError):
            decode_transaction("0x" + raw_hex[:2] + " " + raw_hex[2:])
