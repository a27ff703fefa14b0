from project_creator.pipeline import main

main()
