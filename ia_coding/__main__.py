from .chat_cli import main

main()
