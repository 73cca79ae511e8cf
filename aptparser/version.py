"The current apt-parser version number"
aptparser_version = "1.4.4"
