"""wichtel command line and MCP surfaces for the gift-exchange draw."""
