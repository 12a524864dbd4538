from webvtt_codec.cli import main

main()
