"""edac_util: command-line consumer of the edac library."""
