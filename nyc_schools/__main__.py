from nyc_schools.cli import main

main()
