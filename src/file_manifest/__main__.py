from file_manifest.cli import main

main()
