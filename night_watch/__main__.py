from night_watch.main import main

main()
