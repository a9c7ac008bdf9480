SERVICE_NAME = "exchange-support"
