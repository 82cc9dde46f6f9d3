from kudu_datagen.main import main

main()
