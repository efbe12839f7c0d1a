from wallet_build.cli.cli import main

if __name__ == "__main__":
    main()
