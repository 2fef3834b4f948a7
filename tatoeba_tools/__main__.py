from tatoeba_tools.cli import main

main()
