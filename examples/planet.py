import pylibnoise as pln
import matplotlib.pyplot as plt

continents = pln.Perlin(frequency=1.5, octave_count=8, seed=7)
mountains = pln.RidgedMultifractal(frequency=3.0, octave_count=8, seed=8)
relief = pln.Exponent(pln.Max(continents, mountains), exponent=1.5)

# tilt the planet's axis
planet = pln.Rotate(pln.Turbulence(relief, power=0.1, frequency=3.0, seed=9), 0.0, 0.0, 23.5)

nmap = pln.NoiseMap2D(1024, 512, generator=planet)
nmap.generate_spherical(pln.SOUTH, pln.NORTH, pln.WEST, pln.EAST)

colours = pln.render.Gradient.terrain()
img = pln.render.to_image(nmap, colours)
img.save("planet.png")

# same relief wrapped on a cylinder, coloured with a matplotlib colormap
tube = pln.NoiseMap2D(1024, 256, generator=relief)
tube.generate_cylindrical(pln.ANGLE_MIN, pln.ANGLE_MAX, -0.5, 0.5)

fig, ax = plt.subplots(2, 1, figsize=(10, 8))
ax[0].imshow(img, origin="lower")
ax[0].set_title("spherical projection (equirectangular)")
ax[1].imshow(pln.render.to_image(tube, pln.render.Gradient.from_colormap("magma")))
ax[1].set_title("cylindrical projection")
plt.show()
