from RestaurantSearch.cli import main

main()
