"""python3 -m indent_warden: run the scan."""

from indent_warden import main

main()
