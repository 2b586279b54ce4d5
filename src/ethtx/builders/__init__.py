from ethtx.builders.rpc_params import (
    CallParameters,
    RpcMethod,
    build_raw_transaction_params,
    build_request_params,
    to_call_parameters,
)

__all__ = [
    "CallParameters",
    "RpcMethod",
    "to_call_parameters",
    "build_request_params",
    "build_raw_transaction_params",
]
