# Checks the staking credentials end to end on an Ethereum network.
#
# Everything comes from the environment (or a .env file next to where you run it):
#   NETWORK             mainnet or holesky
#   EXECUTION_API_KEY   key for the execution RPC endpoint
#   STAKING_API_KEY     key for the staking API
#   PRIVATE_KEY         hex private key of the funding account (KEEP THIS SECRET)
#   RECEIVER_ADDRESS    receiver of the optional test transfer
#
# Install first (pip install .), then run either
#   steak-check
# or, from the repository root,
#   python prop/ethereum.py

from steak.flow import main

if __name__ == "__main__":
    main()
