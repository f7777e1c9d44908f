# exitstatus/__main__.py

from exitstatus.cli.main import main

if __name__ == "__main__":
    main()
