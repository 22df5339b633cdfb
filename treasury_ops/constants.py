from web3 import Web3

# Environment variables read at startup (all required)
RPC_URL_ENV = "RPC_BASE_SEPOLIA"
PRIVATE_KEY_ENV = "DEPLOYER_PRIVATE_KEY"
TREASURY_ADDRESS_ENV = "TREASURY_ADDRESS"
TOKEN_ADDRESS_ENV = "ZIR_TOKEN_ADDRESS"
ESCROW_ADDRESS_ENV = "ESCROW_ADDRESS"

# --- ASSETS ---
TOKEN_SYMBOL = "ZIR"
TOKEN_UNIT = "mwei"  # 10**6, ZIR has 6 decimals
NATIVE_SYMBOL = "ETH"

# 100,000 ZIR in base units
TRANSFER_AMOUNT = Web3.to_wei("100000", TOKEN_UNIT)

# Signer must hold at least this much native currency to pay for gas
MIN_GAS_RESERVE = Web3.to_wei("0.001", "ether")
