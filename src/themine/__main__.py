from themine.main import main

main()
