if __name__ == "__main__":
    from trending_channels.app import cli

    cli()
