"""Resource loading: entity registry and objects, mesh loading, XML object files and the resource manager."""