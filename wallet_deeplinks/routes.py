# wallet_deeplinks/routes.py
# Screen names understood by the host navigator.

WALLET_VIEW = "WalletView"

SEND_VIEW = "SendView"
SEND = "Send"
SEND_FLOW_VIEW = "SendFlowView"
SEND_TO = "SendTo"

BROWSER_HOME = "BrowserTabHome"
BROWSER_VIEW = "BrowserView"

RAMP_BUY = "RampBuy"
