from play_developer_mcp.server import main

main()
