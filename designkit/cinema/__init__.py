"""Cinema seats, screens with seat grids, movies and theaters."""